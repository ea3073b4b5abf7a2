"""
公共测试夹具
"""

from datetime import date

import pytest
from kdp_forecast.models.book import Book, Genre


@pytest.fixture
def make_book():
    """构造书籍，未指定字段取场景默认值"""
    def _make(**overrides) -> Book:
        fields = dict(
            id="book-1",
            title="Test Book",
            launch_date=date(2025, 3, 5),
            word_count=50000,
            quality=7,
            initial_reviews=0,
            genre=Genre.FICTION,
            manual_pricing=False,
            auto_optimize=False,
            amazon_ad_budget=60,
            facebook_ad_budget=60,
            is_series=False,
        )
        fields.update(overrides)
        return Book(**fields)
    return _make
