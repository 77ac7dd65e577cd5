"""
Healing Texts Test Suite
========================

This package contains tests for the healing texts system including:
- Unit tests for the catalog, API, client renderer and utilities
- Integration tests for the API and client renderer working together
"""
