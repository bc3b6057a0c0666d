"""Request middleware and dependencies."""
