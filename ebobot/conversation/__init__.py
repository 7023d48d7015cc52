"""Conversation traffic models, state store and per-conversation locking."""
