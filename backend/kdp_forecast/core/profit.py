"""
单期利润函数

给定广告预算和参数包计算当期净利润：

1. 付费销量 = budget / effectiveCPA
2. 效率拖累 = max(0.5, 1 - budget / 2500)
3. 总销量 = floor(付费销量 * 效率拖累 + 自然销量)
4. KU 阅读 = floor(总销量 * readsPerSale)，KENP 收益 = 阅读 * (字数 / 250) * 0.004
5. 总收入 = 销量 * 价格 * 版税率 + KENP 收益 + 系列连带收益
6. 净利润 = 总收入 - budget

优化器目标函数和最终记账都走 evaluate_period，二者不会出现偏差
"""

import math
from typing import NamedTuple

from ..models.params import PeriodParams

KENP_RATE = 0.004
WORDS_PER_KENP_UNIT = 250
EFFICIENCY_SCALE = 2500.0
MIN_EFFICIENCY = 0.5


class PeriodOutcome(NamedTuple):
    """单期计算明细"""
    units_sold: int
    ku_reads: int
    sales_revenue: float
    ku_revenue: float
    series_revenue: float
    gross_revenue: float
    net_profit: float


def evaluate_period(budget: float, params: PeriodParams) -> PeriodOutcome:
    """
    计算单期完整明细

    Args:
        budget: 当期广告总预算
        params: 参数包

    Returns:
        PeriodOutcome
    """
    # 1. 付费销量（边际递减）
    paid_sales = budget / params.effective_cpa if budget > 0 else 0.0
    efficiency_drag = max(MIN_EFFICIENCY, 1.0 - budget / EFFICIENCY_SCALE)
    effective_paid_sales = paid_sales * efficiency_drag

    # 2. 销量与 KU 阅读
    units_sold = math.floor(effective_paid_sales + params.organic_sales)
    ku_reads = math.floor(units_sold * params.reads_per_sale_base)
    ku_revenue = ku_reads * (params.word_count / WORDS_PER_KENP_UNIT) * KENP_RATE

    # 3. 收入
    sales_revenue = units_sold * params.price * params.royalty_rate
    series_revenue = units_sold * params.series_ltv if params.is_series else 0.0
    gross_revenue = sales_revenue + ku_revenue + series_revenue

    return PeriodOutcome(
        units_sold=units_sold,
        ku_reads=ku_reads,
        sales_revenue=sales_revenue,
        ku_revenue=ku_revenue,
        series_revenue=series_revenue,
        gross_revenue=gross_revenue,
        net_profit=gross_revenue - budget,
    )


def period_profit(budget: float, params: PeriodParams) -> float:
    """单期净利润（优化器目标函数）"""
    return evaluate_period(budget, params).net_profit
