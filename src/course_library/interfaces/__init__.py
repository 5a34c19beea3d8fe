"""HTTP interface: API routes, static files and HTML pages."""
