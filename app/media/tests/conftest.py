"""
Test fixtures for media app.

Provides fixtures for:
- API clients (anonymous, staff)
- Media assets and owner entities
- MEDIA_LIBRARY configuration variants
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

import pytest
from rest_framework.test import APIClient

from content.tests.factories import ArticleFactory, PageFactory
from media.tests.factories import MediaAssetFactory, StaffUserFactory

if TYPE_CHECKING:
    from django.contrib.auth.models import User

    from content.models import Article, Page
    from media.models import MediaAsset


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def media_library(settings):
    """
    Return a function updating MEDIA_LIBRARY for one test.

    Assigning the setting sends ``setting_changed``, which resets the
    cached field and owner registries.

    Usage:
        media_library(USE_PROPERTY_FALLBACK=True)
    """

    def configure(**overrides):
        config = copy.deepcopy(settings.MEDIA_LIBRARY)
        config.update(overrides)
        settings.MEDIA_LIBRARY = config
        return config

    return configure


@pytest.fixture
def property_fallback(media_library):
    """Enable the fallback locale policy with "en" as fallback."""
    return media_library(FALLBACK_LOCALE="en", USE_PROPERTY_FALLBACK=True)


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def api_client() -> APIClient:
    """Return unauthenticated API client."""
    return APIClient()


@pytest.fixture
def staff_user(db) -> "User":
    """Create a staff user."""
    return StaffUserFactory()


@pytest.fixture
def staff_client(staff_user: "User") -> APIClient:
    """Return API client authenticated as a staff user."""
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def media(db) -> "MediaAsset":
    """Create a media asset."""
    return MediaAssetFactory(
        filename="sunset@2x.jpg",
        uuid="f3c1a2b4-sunset",
        width=1200,
        height=800,
    )


@pytest.fixture
def article(db) -> "Article":
    """Create an article titled "Hello"."""
    return ArticleFactory(title="Hello")


@pytest.fixture
def page(db) -> "Page":
    """Create a page named "About"."""
    return PageFactory(name="About")
