"""Infrastructure layer - logging and the demo registry."""
