"""Storage tree introspection."""
