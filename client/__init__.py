"""
Client renderer for the healing texts system.
Fetches the catalog once and turns UI events into state transitions and markup.
"""

from .state import AppState, CATEGORY_BUTTONS
from .dispatch import Event, Renderer, dispatch, ACTION_HANDLERS
from .fetcher import CatalogClient
from .render import category_name, render_card, render_grid, render_modal, placeholder_image_url

__all__ = [
    'AppState',
    'CATEGORY_BUTTONS',
    'Event',
    'Renderer',
    'dispatch',
    'ACTION_HANDLERS',
    'CatalogClient',
    'category_name',
    'render_card',
    'render_grid',
    'render_modal',
    'placeholder_image_url',
]
