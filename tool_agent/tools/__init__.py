"""Tool executors, registry and dispatcher."""
