"""
Markup rendering for the client renderer.

Pure functions from state/records to HTML fragments. The grid is always
rebuilt from scratch; the modal is rendered hidden when no record is open.
"""

from html import escape
from typing import Optional

from catalog import QuoteRecord, ALL_CATEGORIES

from .state import AppState, visible_records, category_buttons

# 分类中文名称
CATEGORY_NAMES = {
    "nature": "自然",
    "wisdom": "智慧",
    "inspiration": "励志",
    "peace": "宁静",
    "night": "夜晚",
}

ALL_LABEL = "全部"

PLACEHOLDER_IMAGE_URL = "https://picsum.photos/seed/{record_id}/800/600.jpg"


def category_name(category: str) -> str:
    """未知分类原样显示"""
    return CATEGORY_NAMES.get(category) or category


def image_url(record: QuoteRecord) -> str:
    return record.image


def placeholder_image_url(record_id: int) -> str:
    return PLACEHOLDER_IMAGE_URL.format(record_id=record_id)


def render_card(record: QuoteRecord) -> str:
    parts = [
        f'<div class="healing-card" data-id="{record.id}">',
        f'<div class="healing-text">{escape(record.text)}</div>',
    ]
    if record.author:
        parts.append(f'<div class="healing-author">— {escape(record.author)}</div>')
    parts.append(f'<div class="healing-category">{escape(category_name(record.category))}</div>')
    parts.append('</div>')
    return "".join(parts)


def render_grid(state: AppState) -> str:
    cards = "".join(render_card(record) for record in visible_records(state))
    return f'<div class="healing-grid" id="healingGrid">{cards}</div>'


def render_category_buttons(state: AppState) -> str:
    buttons = []
    for category, active in category_buttons(state):
        css_class = "category-btn active" if active else "category-btn"
        label = ALL_LABEL if category == ALL_CATEGORIES else category_name(category)
        buttons.append(
            f'<button class="{css_class}" data-category="{escape(category)}">{escape(label)}</button>'
        )
    return "".join(buttons)


def render_modal_text(record: QuoteRecord) -> str:
    text = escape(record.text)
    if record.author:
        text += f'<br><small class="modal-author">— {escape(record.author)}</small>'
    if record.source:
        text += f'<br><small class="modal-source">{escape(record.source)}</small>'
    return text


def render_modal(state: AppState) -> str:
    record: Optional[QuoteRecord] = state.modal
    if record is None:
        return '<div class="modal" id="imageModal" style="display: none;"></div>'

    fallback = placeholder_image_url(record.id)
    return (
        '<div class="modal" id="imageModal" style="display: block;">'
        '<div class="modal-content">'
        '<span class="close">&times;</span>'
        f'<img id="modalImage" src="{escape(image_url(record))}" '
        f'data-fallback="{escape(fallback)}" '
        f'onerror="this.onerror=null;this.src=this.dataset.fallback;">'
        f'<div id="modalText" class="modal-text">{render_modal_text(record)}</div>'
        '</div>'
        '</div>'
    )
