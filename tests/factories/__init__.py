"""Test factories for creating test data."""

from tests.factories.activity import ActivityFactory, message_payload

__all__ = ["ActivityFactory", "message_payload"]
