"""
Media library app for CMS media metadata.

This app provides:
- MediaAsset model with configurable, locale-aware metadata fields
- Mediable association rows placing media on any content entity
- Owner resolution across owner types (morph map, block indirection)
- Deletion guard refusing to delete media still in use
"""
