"""Domain layer: exceptions, ports and schema definitions."""
