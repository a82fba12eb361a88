"""Helpers shared by the command line runner and the API client."""
