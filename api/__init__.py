"""
API module for the healing texts system.
Provides the FastAPI-based read-only REST API and static asset serving.
"""

__all__ = ['app', 'routes', 'models', 'middleware']
