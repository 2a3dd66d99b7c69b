"""Identity application layer: registration, login and the current user."""
