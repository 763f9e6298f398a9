"""Infrastructure layer: logging and attribute storage."""
