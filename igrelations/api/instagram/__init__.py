"""__init__.py for instagram.

Submodules:
-----------
- api_instagram: The Instagram client class.
- relationships: Relationships endpoints (follow, block, listings...).
- api_instagram_types: Type definitions for Instagram API data structures.
- api_instagram_errors: Exceptions raised by the client.
"""
