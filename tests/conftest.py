# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides a chainable fake for the Supabase query builder
# - Provides sample product rows and image files
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds its settings at import time

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-supabase-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-for-hs256-signing")
os.environ.setdefault("ADMIN_USER_ID", "user_admin")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from unittest.mock import MagicMock

import pytest

from core.models.product import ImageFile

QUERY_METHODS = ("select", "eq", "or_", "order", "single", "insert", "limit")

TEN_WORDS = "A sturdy adjustable desk lamp with warm light for reading"


def make_query(data=None, error: Exception | None = None) -> MagicMock:
    """
    Fake PostgREST query builder.

    Every builder method returns the same mock, so a chain like
    .select().eq().order().execute() ends at one execute() whose result is
    `data` (or which raises `error`).
    """
    query = MagicMock()
    for method in QUERY_METHODS:
        getattr(query, method).return_value = query

    if error is not None:
        query.execute.side_effect = error
    else:
        query.execute.return_value = MagicMock(data=data)
    return query


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def supabase_client():
    """A MagicMock standing in for supabase.Client."""
    return MagicMock()


@pytest.fixture
def product_row():
    """A Product row as PostgREST returns it."""
    return {
        "id": "550e8400-e29b-41d4-a716-446655440000",
        "name": "Desk Lamp",
        "company": "Acme",
        "price": 1999,
        "description": TEN_WORDS,
        "image": "https://test-project.supabase.co/storage/v1/object/public/main-bucket/1718000000000-lamp.jpg",
        "featured": True,
        "clerkId": "user_123",
        "createdAt": "2024-06-10T10:30:00+00:00",
        "updatedAt": "2024-06-10T10:30:00+00:00",
    }


@pytest.fixture
def valid_form():
    """Raw create-product form values as the browser sends them."""
    return {
        "name": "Desk Lamp",
        "company": "Acme",
        "price": "1999",
        "description": TEN_WORDS,
        "featured": "true",
    }


@pytest.fixture
def jpeg_image():
    """An 800KB JPEG upload."""
    return ImageFile(
        filename="Desk Lamp.jpg",
        content_type="image/jpeg",
        content=b"\xff" * (800 * 1024),
    )
