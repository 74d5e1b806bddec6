"""API endpoint routers, one module per resource."""
