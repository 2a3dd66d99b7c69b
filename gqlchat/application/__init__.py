"""
Application layer.

Use cases called by the GraphQL resolver layer. They turn raw scalar
arguments into value objects, drive the aggregates and save them
through the store ports.
"""
