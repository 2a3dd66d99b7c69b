"""Chat application layer: conversations, messages and message subscriptions."""
