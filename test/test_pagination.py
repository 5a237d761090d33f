"""
Tests for pagination helpers
"""

import pytest

from app.utils.pagination import Page, page_count, page_offset


class TestPageMath:
    @pytest.mark.parametrize(
        "total, limit, expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (12, 5, 3)],
    )
    def test_page_count_is_ceiling(self, total, limit, expected):
        assert page_count(total, limit) == expected

    def test_page_offset(self):
        assert page_offset(1, 10) == 0
        assert page_offset(3, 5) == 10

    def test_rejects_invalid_values(self):
        with pytest.raises(ValueError):
            page_count(10, 0)
        with pytest.raises(ValueError):
            page_offset(0, 10)


class TestPage:
    def test_to_dict(self):
        page = Page(items=["a", "b"], total=12, page=2, limit=5)
        assert page.pages == 3
        assert page.to_dict() == {
            "items": ["a", "b"],
            "pagination": {"page": 2, "limit": 5, "total": 12, "pages": 3},
        }


class TestPaginationQuery:
    def test_limit_above_maximum_is_rejected(self, client):
        response = client.get("/api/blog", params={"limit": 101})
        assert response.status_code == 400
        assert response.json()["error"]["error_code"] == "VALIDATION_FAILED"

    def test_page_zero_is_rejected(self, client):
        assert client.get("/api/blog", params={"page": 0}).status_code == 400
