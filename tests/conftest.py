"""Test configuration and fixtures for pytest.

Provides fixtures for:
- A fresh in-memory store per test
- A waitlist service bound to that store
- A FastAPI app and TestClient serving that store
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fitforhire.config import Settings
from fitforhire.main import create_app
from fitforhire.services import WaitlistService
from fitforhire.storage import MemoryStorage


@pytest.fixture
def test_settings() -> Settings:
    """Settings with fixed values, independent of the environment."""
    return Settings(
        app_name="FitForHire API (Test)",
        app_version="0.1.0-test",
        debug=True,
        api_prefix="/api",
        cors_origins=["http://localhost:5173"],
    )


@pytest.fixture
def store() -> MemoryStorage:
    """Create an empty in-memory store."""
    return MemoryStorage()


@pytest.fixture
def service(store: MemoryStorage) -> WaitlistService:
    """Create a waitlist service bound to the test store."""
    return WaitlistService(store)


@pytest.fixture
def test_app(test_settings: Settings, store: MemoryStorage) -> FastAPI:
    """Create an app serving the test store."""
    return create_app(settings=test_settings, store=store)


@pytest.fixture
def client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    """Create a test client with the app lifespan running."""
    with TestClient(test_app) as test_client:
        yield test_client
