"""
Component tests for the storefront API

Component tests drive the FastAPI routes end to end against the real
in-memory catalog, bundle offers and cart sessions (no mocking).
"""
