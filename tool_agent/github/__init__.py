"""GitHub API client."""
