"""
Application state for the client renderer.
Every transition returns a new AppState; nothing is mutated in place.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from catalog import QuoteRecord, ALL_CATEGORIES
from catalog.store import filter_records
from utils import client_logger

# 分类按钮（页面顺序）
CATEGORY_BUTTONS = (ALL_CATEGORIES, "nature", "wisdom", "inspiration", "peace", "night")


@dataclass(frozen=True)
class AppState:
    """客户端状态"""
    healing_data: Tuple[QuoteRecord, ...] = ()
    current_category: str = ALL_CATEGORIES
    modal: Optional[QuoteRecord] = None


def load_catalog(state: AppState, records: Iterable[Union[QuoteRecord, Dict[str, Any]]]) -> AppState:
    items = tuple(
        record if isinstance(record, QuoteRecord) else QuoteRecord(**record)
        for record in records
    )
    return replace(state, healing_data=items)


def select_category(state: AppState, category: str) -> AppState:
    if category == state.current_category:
        return state
    return replace(state, current_category=category)


def visible_records(state: AppState) -> List[QuoteRecord]:
    """当前分类下可见的记录，保持目录顺序"""
    return filter_records(state.healing_data, state.current_category)


def category_buttons(state: AppState) -> List[Tuple[str, bool]]:
    """每个分类按钮及其激活状态，始终只有一个激活"""
    return [(category, category == state.current_category) for category in CATEGORY_BUTTONS]


def open_modal(state: AppState, record_id: int) -> AppState:
    for record in state.healing_data:
        if record.id == record_id:
            return replace(state, modal=record)
    client_logger.warning(f"[Client] Card clicked for unknown id: {record_id}")
    return state


def close_modal(state: AppState) -> AppState:
    if state.modal is None:
        return state
    return replace(state, modal=None)
