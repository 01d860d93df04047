"""HTTP request/response contracts."""
