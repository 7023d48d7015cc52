"""Shared fixtures for API tests."""

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ebobot.api.app import create_app
from ebobot.api.dependencies import get_mutex, get_state_store, reset_dependencies
from ebobot.conversation.mutex import ConversationMutex, InMemoryConversationMutex
from ebobot.conversation.stores import InMemoryConversationStateStore


@pytest.fixture
def mutex() -> ConversationMutex:
    return InMemoryConversationMutex(blocking_timeout=1.0)


@pytest.fixture
async def app(
    store: InMemoryConversationStateStore,
    mutex: ConversationMutex,
) -> AsyncIterator[FastAPI]:
    """Create the application over in-memory backends."""
    await reset_dependencies()

    app = create_app()
    app.dependency_overrides[get_state_store] = lambda: store
    app.dependency_overrides[get_mutex] = lambda: mutex

    yield app

    app.dependency_overrides.clear()
    await reset_dependencies()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app, raise_server_exceptions=False)
