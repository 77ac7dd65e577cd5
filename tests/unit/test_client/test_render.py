"""
Unit tests for client markup rendering
"""

import pytest

from catalog import QuoteRecord
from client.render import (
    category_name,
    image_url,
    placeholder_image_url,
    render_card,
    render_category_buttons,
    render_grid,
    render_modal,
)
from client.state import AppState, load_catalog, open_modal, select_category


@pytest.mark.unit
class TestRender:
    """Test cases for rendering functions"""

    @pytest.mark.parametrize("tag, label", [
        ("nature", "自然"),
        ("wisdom", "智慧"),
        ("inspiration", "励志"),
        ("peace", "宁静"),
        ("night", "夜晚"),
    ])
    def test_category_name(self, tag, label):
        assert category_name(tag) == label

    def test_unknown_category_shown_verbatim(self):
        assert category_name("breeze") == "breeze"

    def test_render_card_with_author(self, store):
        html = render_card(store.get(8))
        assert '<div class="healing-text">人生如逆旅，我亦是行人。</div>' in html
        assert '<div class="healing-author">— 苏轼</div>' in html
        assert '<div class="healing-category">智慧</div>' in html
        assert 'data-id="8"' in html

    def test_render_card_without_author(self, sample_records):
        html = render_card(sample_records[2])
        assert "healing-author" not in html
        assert '<div class="healing-category">breeze</div>' in html

    def test_render_card_escapes_text(self, sample_records):
        html = render_card(sample_records[2])
        assert "微风 &lt;轻拂&gt;" in html
        assert "<轻拂>" not in html

    def test_render_grid_rebuilds_for_category(self, loaded_state):
        html = render_grid(select_category(loaded_state, "night"))
        assert html.count('class="healing-card"') == 1
        assert "星空璀璨" in html

    def test_render_grid_all(self, loaded_state, store):
        html = render_grid(loaded_state)
        assert html.count('class="healing-card"') == len(store)

    def test_render_grid_preserves_order(self, loaded_state):
        html = render_grid(select_category(loaded_state, "wisdom"))
        positions = [html.index(f'data-id="{record_id}"') for record_id in (3, 7, 8, 9, 12)]
        assert positions == sorted(positions)

    def test_render_grid_empty(self):
        assert render_grid(AppState()) == '<div class="healing-grid" id="healingGrid"></div>'

    def test_render_category_buttons(self, loaded_state):
        html = render_category_buttons(select_category(loaded_state, "peace"))
        assert html.count("active") == 1
        assert '<button class="category-btn active" data-category="peace">宁静</button>' in html
        assert '<button class="category-btn" data-category="all">全部</button>' in html

    def test_render_modal_closed(self, loaded_state):
        html = render_modal(loaded_state)
        assert "display: none" in html
        assert "modalImage" not in html

    def test_render_modal_open(self, loaded_state):
        html = render_modal(open_modal(loaded_state, 9))
        assert "display: block" in html
        assert 'src="/images/lotus.jpg"' in html
        assert "落红不是无情物，化作春泥更护花。" in html
        assert "— 龚自珍" in html
        assert "《己亥杂诗》" in html
        assert 'data-fallback="https://picsum.photos/seed/9/800/600.jpg"' in html

    def test_render_modal_without_metadata(self, sample_records):
        state = open_modal(load_catalog(AppState(), sample_records), 3)
        html = render_modal(state)
        assert "modal-author" not in html
        assert "modal-source" not in html

    def test_image_url_uses_record_image(self, store):
        assert image_url(store.get(1)) == "/images/sunshine.jpg"

    def test_placeholder_image_url(self):
        assert placeholder_image_url(42) == "https://picsum.photos/seed/42/800/600.jpg"
