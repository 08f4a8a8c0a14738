"""Calculator arithmetic."""
