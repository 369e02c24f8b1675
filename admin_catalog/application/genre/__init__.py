"""Genre use cases."""
