"""Social infrastructure: stores and projections."""
