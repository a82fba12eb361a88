"""__init__.py for instagram tests."""
