"""
Domain layer.

The domain layer contains the core rules of the application.
It has no dependencies on external frameworks or infrastructure
and performs no logging.

This layer contains:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable validated primitives
- Aggregate Roots: Units of load and save
- Domain Events: Facts recorded by aggregates
"""
