"""Identity infrastructure: stores and projections."""
