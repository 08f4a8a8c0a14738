"""Calculator and GitHub tools behind a uniform tool-invocation contract."""
