"""Social application layer: people, best friends and car ownership."""
