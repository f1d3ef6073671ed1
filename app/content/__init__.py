"""
Content app: entities that place media from the media library.

This app provides:
- Article: sluggable content titled by ``title``
- Page: content titled by ``name``
- Block: content fragment embedded in an article or page
"""
