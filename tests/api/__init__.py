"""__init__.py for api tests."""
