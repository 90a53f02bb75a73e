# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Pins environment variables before any imports
# - Provides an app built with test settings and a TestClient around it
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app from the environment on import

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings with a known environment and a small body limit."""
    return Settings(ENVIRONMENT="test", MAX_BODY_SIZE_KB=4)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Fresh application per test."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI):
    """TestClient with the lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def echo_payload():
    """Sample JSON payload for the echo endpoint."""
    return {"test": "data", "value": 123}
