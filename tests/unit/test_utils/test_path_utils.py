"""
Unit tests for path helpers and exceptions
"""

import pytest

from utils.exceptions import HealingSystemError, RecordNotFoundError, create_error_response
from utils.path_utils import ensure_directories


@pytest.mark.unit
class TestEnsureDirectories:
    """Test cases for ensure_directories"""

    def test_creates_missing(self, tmp_path):
        root = tmp_path / "public"
        created = ensure_directories(root)
        assert set(created) == {root, root / "images", root / "css", root / "js"}
        assert all(path.is_dir() for path in created)

    def test_idempotent(self, tmp_path):
        root = tmp_path / "public"
        ensure_directories(root)
        assert ensure_directories(root) == []

    def test_partial(self, tmp_path):
        root = tmp_path / "public"
        (root / "css").mkdir(parents=True)
        assert ensure_directories(root) == [root / "images", root / "js"]


@pytest.mark.unit
class TestExceptions:
    """Test cases for the exception hierarchy"""

    def test_record_not_found(self):
        error = RecordNotFoundError(999)
        assert isinstance(error, HealingSystemError)
        assert error.context == {"record_id": 999}
        assert RecordNotFoundError.public_message == "未找到相关内容"

    def test_create_error_response(self):
        response = create_error_response(RecordNotFoundError("abc"))
        assert response["error"] is True
        assert response["error_code"] == "CAT_001"
        assert response["context"] == {"record_id": "abc"}
