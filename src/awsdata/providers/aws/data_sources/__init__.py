"""AWS data sources."""
