"""Services for pomodo-cli."""
