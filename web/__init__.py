"""Web layer - thin adapters over the election container."""
