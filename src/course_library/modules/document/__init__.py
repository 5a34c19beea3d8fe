"""Document upload and catalog listing."""
