"""
Unit tests for the cart core

These tests exercise the reducer, store, pricing rules and domain helpers
directly, without the HTTP layer.
"""
