"""
Infrastructure layer.

In-memory implementations of the application ports, projections
for the transport layer and demo seed data.
"""
