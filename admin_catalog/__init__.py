"""Administrative catalog service for categories and genres."""
