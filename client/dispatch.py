"""
Event dispatch for the client renderer.

UI actions are looked up in ACTION_HANDLERS and applied as pure state
transitions; Renderer keeps the current state and produces markup on demand.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from utils import client_logger, UnknownActionError, ErrorCodes

from .fetcher import CatalogClient
from .render import render_category_buttons, render_grid, render_modal
from .state import AppState, close_modal, load_catalog, open_modal, select_category

# 点击目标为模态框本身（而非内容区域）时视为点击背景
BACKDROP_TARGET = "modal"
ESCAPE_KEY = "Escape"


@dataclass(frozen=True)
class Event:
    """UI事件"""
    action: str
    payload: Dict[str, Any] = field(default_factory=dict)


def _on_loaded(state: AppState, payload: Dict[str, Any]) -> AppState:
    return load_catalog(state, payload.get("records", ()))


def _on_category_clicked(state: AppState, payload: Dict[str, Any]) -> AppState:
    return select_category(state, payload["category"])


def _on_card_clicked(state: AppState, payload: Dict[str, Any]) -> AppState:
    return open_modal(state, int(payload["id"]))


def _on_close_clicked(state: AppState, payload: Dict[str, Any]) -> AppState:
    return close_modal(state)


def _on_backdrop_clicked(state: AppState, payload: Dict[str, Any]) -> AppState:
    if payload.get("target") != BACKDROP_TARGET:
        return state
    return close_modal(state)


def _on_key_pressed(state: AppState, payload: Dict[str, Any]) -> AppState:
    if payload.get("key") != ESCAPE_KEY:
        return state
    return close_modal(state)


ACTION_HANDLERS: Dict[str, Callable[[AppState, Dict[str, Any]], AppState]] = {
    "loaded": _on_loaded,
    "category_clicked": _on_category_clicked,
    "card_clicked": _on_card_clicked,
    "close_clicked": _on_close_clicked,
    "backdrop_clicked": _on_backdrop_clicked,
    "key_pressed": _on_key_pressed,
}


def dispatch(state: AppState, event: Event) -> AppState:
    handler = ACTION_HANDLERS.get(event.action)
    if handler is None:
        raise UnknownActionError(
            f"Unknown UI action: {event.action}",
            ErrorCodes.CLIENT_UNKNOWN_ACTION,
            context={"action": event.action}
        )
    return handler(state, event.payload)


class Renderer:
    """持有客户端状态并在每次事件后重新渲染"""

    def __init__(self, client: Optional[CatalogClient] = None, state: Optional[AppState] = None):
        self.client = client or CatalogClient()
        self.state = state or AppState()

    async def start(self) -> AppState:
        """页面加载：获取一次目录数据"""
        records = await self.client.fetch_healing_data()
        return self.send(Event("loaded", {"records": records}))

    def send(self, event: Event) -> AppState:
        self.state = dispatch(self.state, event)
        client_logger.debug(f"[Client] {event.action} -> category={self.state.current_category}")
        return self.state

    def view(self) -> Dict[str, str]:
        return {
            "buttons": render_category_buttons(self.state),
            "grid": render_grid(self.state),
            "modal": render_modal(self.state),
        }
