"""
Core Application - Infrastructure & Base Classes

This app contains infrastructure code that provides a foundation
for the application:

- Generic, reusable base classes (no domain-specific logic)
- Clear extension points for domain apps
- Infrastructure concerns separated from business logic

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Model Mixins (import from core.model_mixins):
    - SlugMixin: Auto-generated URL slugs

Services (import from core.services):
    - BaseService: Base class for service layer
    - ServiceResult: Standard result wrapper for success/failure handling

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes
    - ValidationError: Input validation failures
    - NotFoundError: Resource not found
    - ConflictError: State conflicts (resource still in use, etc.)

Protocols (import from core.protocols):
    - StorageReader: Single-table equality lookups

Helpers (import from core.helpers):
    - lcfirst: Lower-case first character
    - pluralize: English pluralization of identifiers
    - capitalize_words: Word capitalization for labels

Note:
    - Business logic should NOT go here. Extend core classes in your domain apps.
    - Django models and model mixins are NOT imported here to avoid AppRegistryNotReady
      errors. Import them directly from their modules.
"""

# Services (no Django model dependencies)
from .services import BaseService, ServiceResult

# Exceptions (no Django dependencies)
from .exceptions import (
    BaseApplicationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

# Protocols (no Django dependencies)
from .protocols import StorageReader

# Helpers (no Django dependencies)
from .helpers import capitalize_words, lcfirst, pluralize

__all__ = [
    # Services
    "BaseService",
    "ServiceResult",
    # Exceptions
    "BaseApplicationError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    # Protocols
    "StorageReader",
    # Helpers
    "lcfirst",
    "pluralize",
    "capitalize_words",
]
