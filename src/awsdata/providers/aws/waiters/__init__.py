"""Status refresh helpers consumed by external polling loops."""
