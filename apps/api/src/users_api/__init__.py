"""HTTP transport for the user management API."""
