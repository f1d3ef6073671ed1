"""
Helper functions for common infrastructure operations.

This module provides domain-agnostic utility functions for:
- Identifier casing (lower-camel conversion)
- English pluralization of type names
- Word capitalization for generated labels

These utilities are pure infrastructure - they have no knowledge
of domain concepts like media, owners, or business logic.

Usage:
    from core.helpers import lcfirst, pluralize

    module = pluralize(lcfirst("BlogPost"))  # "blogPosts"
"""

from __future__ import annotations

import re

# Suffixes that take "es" in the plural ("box" -> "boxes", "church" -> "churches")
_SIBILANT_SUFFIXES = ("s", "x", "z", "ch", "sh")

_IRREGULAR_PLURALS = {
    "child": "children",
    "person": "people",
    "man": "men",
    "woman": "women",
    "media": "media",
    "news": "news",
}

_WORD_BOUNDARY = re.compile(r"([A-Z]?[a-z0-9]+|[A-Z]+(?![a-z]))$")


def lcfirst(value: str) -> str:
    """
    Lower-case the first character of a string.

    Args:
        value: String to convert

    Returns:
        String with its first character lower-cased

    Example:
        lcfirst("BlogPost")  # "blogPost"
    """
    if not value:
        return value
    return value[0].lower() + value[1:]


def _pluralize_word(word: str) -> str:
    lowered = word.lower()

    if lowered in _IRREGULAR_PLURALS:
        plural = _IRREGULAR_PLURALS[lowered]
        return word[0] + plural[1:] if word[:1].isupper() else plural

    if lowered.endswith("y") and len(lowered) > 1 and lowered[-2] not in "aeiou":
        return word[:-1] + "ies"

    if lowered.endswith(_SIBILANT_SUFFIXES):
        return word + "es"

    return word + "s"


def pluralize(value: str) -> str:
    """
    Pluralize an English noun or camel-cased identifier.

    Only the last word of a camel-cased identifier is pluralized, so
    "blogPost" becomes "blogPosts" and "pageCategory" becomes
    "pageCategories".

    Args:
        value: Singular noun or identifier

    Returns:
        Plural form

    Example:
        pluralize("article")   # "articles"
        pluralize("category")  # "categories"
        pluralize("blogPost")  # "blogPosts"
    """
    if not value:
        return value

    match = _WORD_BOUNDARY.search(value)
    if match is None:
        return _pluralize_word(value)

    head, last = value[: match.start()], match.group(0)
    return head + _pluralize_word(last)


def capitalize_words(value: str) -> str:
    """
    Upper-case the first letter of every whitespace-separated word.

    Unlike str.title(), the remaining letters of each word are kept as-is.

    Example:
        capitalize_words("my iPhone photo")  # "My IPhone Photo"
    """
    return " ".join(word[:1].upper() + word[1:] for word in value.split())

