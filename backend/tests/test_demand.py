"""
需求模块测试
"""

import math
import pytest
from kdp_forecast.models.book import Genre
from kdp_forecast.core.demand import (
    calc_demand,
    calc_social_proof,
    calc_launch_multiplier,
    calc_retention_rate,
    apply_ghost_mode,
    reads_per_sale,
)


class TestDemandFactors:
    """需求因子测试"""

    def test_launch_period_factors(self, make_book):
        """quality 7 / fiction / 0 评论的首发期"""
        demand = calc_demand(make_book(), age=0)

        assert demand.social_proof == 1.0
        assert demand.genre_factor == 0.8
        assert demand.base_cpa == 5.0
        assert demand.ad_fatigue == 1.0
        assert demand.effective_cpa == pytest.approx(4.0)
        assert demand.launch_multiplier == 4.0
        assert demand.time_decay_factor == 1.0
        assert demand.base_organic == pytest.approx(14.0)
        assert demand.organic_sales == pytest.approx(56.0)

    def test_ad_fatigue_grows_per_fortnight(self, make_book):
        book = make_book()
        assert calc_demand(book, age=4).ad_fatigue == pytest.approx(1.1)
        assert calc_demand(book, age=4).effective_cpa > calc_demand(book, age=0).effective_cpa

    def test_time_decay_in_month_equivalents(self, make_book):
        """期龄 2（一个月）衰减一次月保留率"""
        demand = calc_demand(make_book(quality=7), age=2)
        assert demand.retention_rate == pytest.approx(0.92)
        assert demand.time_decay_factor == pytest.approx(0.92)

    def test_genre_factors(self, make_book):
        assert calc_demand(make_book(genre=Genre.NON_FICTION), 0).genre_factor == 1.1
        assert calc_demand(make_book(genre=Genre.BUSINESS), 0).genre_factor == 1.5

    def test_base_cpa_floor(self, make_book):
        assert calc_demand(make_book(quality=10), 0).base_cpa == 2.0
        # 超范围质量分时触底 1.5
        assert calc_demand(make_book(quality=11), 0).base_cpa == 1.5

    def test_reviews_lower_cpa(self, make_book):
        no_reviews = calc_demand(make_book(initial_reviews=0), 0)
        many_reviews = calc_demand(make_book(initial_reviews=100), 0)
        assert many_reviews.effective_cpa < no_reviews.effective_cpa
        assert many_reviews.organic_sales > no_reviews.organic_sales

    def test_organic_sales_decline_after_launch(self, make_book):
        book = make_book()
        organic = [calc_demand(book, age).organic_sales for age in range(24)]
        for prev, current in zip(organic, organic[1:]):
            assert current < prev


class TestHelpers:
    """辅助函数测试"""

    def test_social_proof(self):
        assert calc_social_proof(0) == 1.0
        assert calc_social_proof(99) == pytest.approx(1 + math.log(100) * 0.05)

    def test_launch_multiplier_curve(self):
        assert [calc_launch_multiplier(a) for a in range(6)] == [4.0, 2.5, 1.5, 1.2, 1.0, 1.0]

    def test_retention_rate_floor(self):
        assert calc_retention_rate(10) == pytest.approx(0.98)
        assert calc_retention_rate(1) == pytest.approx(0.80)
        assert calc_retention_rate(-20) == 0.5

    def test_reads_per_sale(self):
        assert reads_per_sale(7) == 1.5
        assert reads_per_sale(6) == 0.8

    def test_ghost_mode(self):
        assert apply_ghost_mode(10.0, 0) == pytest.approx(6.0)
        assert apply_ghost_mode(10.0, 25) == 10.0
