"""Domain core for the user management API."""
