"""Data models for pomodo-cli."""
