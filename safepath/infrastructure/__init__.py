"""Infrastructure layer: logging and filesystem backends."""
