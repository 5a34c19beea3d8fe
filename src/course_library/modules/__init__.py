"""Domain modules: documents, storage structure and shared helpers."""
