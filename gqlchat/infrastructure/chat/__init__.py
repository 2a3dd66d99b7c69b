"""Chat infrastructure: stores and projections."""
