"""
定价与版税模块测试
"""

import pytest
from kdp_forecast.core.pricing import price_tiers, royalty_rate, select_price


class TestPriceTiers:
    """定价档位测试"""

    def test_top_tier(self):
        assert price_tiers(9) == {"launch": 3.99, "normal": 9.99}
        assert price_tiers(10) == {"launch": 3.99, "normal": 9.99}

    def test_middle_tier(self):
        assert price_tiers(5) == {"launch": 2.99, "normal": 7.99}
        assert price_tiers(8) == {"launch": 2.99, "normal": 7.99}

    def test_low_tier(self):
        assert price_tiers(4) == {"launch": 0.99, "normal": 3.99}
        assert price_tiers(1) == {"launch": 0.99, "normal": 3.99}

    def test_out_of_range_quality_extrapolates(self):
        """超范围质量分不报错"""
        assert price_tiers(0) == {"launch": 0.99, "normal": 3.99}
        assert price_tiers(12) == {"launch": 3.99, "normal": 9.99}


class TestRoyaltyRate:
    """版税率测试"""

    @pytest.mark.parametrize("price", [2.99, 7.99, 9.99])
    def test_inclusive_band(self, price):
        assert royalty_rate(price) == 0.70

    @pytest.mark.parametrize("price", [0.99, 2.98, 10.00, 14.99])
    def test_outside_band(self, price):
        assert royalty_rate(price) == 0.35


class TestSelectPrice:
    """售价选择测试"""

    def test_auto_pricing(self, make_book):
        book = make_book(quality=9)
        assert select_price(book, is_launch=True) == 3.99
        assert select_price(book, is_launch=False) == 9.99

    def test_manual_pricing(self, make_book):
        book = make_book(manual_pricing=True, price_launch=1.99, price_normal=5.49)
        assert select_price(book, is_launch=True) == 1.99
        assert select_price(book, is_launch=False) == 5.49

    def test_manual_prices_ignored_when_auto(self, make_book):
        book = make_book(quality=7, manual_pricing=False, price_launch=1.99, price_normal=5.49)
        assert select_price(book, is_launch=True) == 2.99
        assert select_price(book, is_launch=False) == 7.99
