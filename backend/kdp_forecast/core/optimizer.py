"""
广告预算优化模块

对每个生效期在离散网格 {0, 25, ..., 1000} 上穷举单期利润函数，取利润最大的预算。
同利润时取先出现者（即更小的预算）。网格步长会改变输出结果，不可调整。
"""

import math
from typing import Dict, NamedTuple, Tuple
import numpy as np

from ..models.book import Genre
from ..models.params import PeriodParams
from .profit import period_profit

BUDGET_STEP = 25
BUDGET_CAP = 1000
BUDGET_GRID = np.arange(0, BUDGET_CAP + BUDGET_STEP, BUDGET_STEP)

# 各类型 Amazon 预算占比，余下给 Facebook
AMAZON_SHARE: Dict[Genre, float] = {
    Genre.FICTION: 0.4,
    Genre.NON_FICTION: 0.7,
    Genre.BUSINESS: 0.8,
}


class BudgetChoice(NamedTuple):
    """优化结果"""
    budget: float
    profit: float
    amazon_spend: float
    facebook_spend: float


def split_budget(budget: float, genre: Genre) -> Tuple[float, float]:
    """
    按类型拆分 Amazon / Facebook 预算

    Amazon 部分四舍五入到整数货币单位（.5 进位），余下归 Facebook
    """
    amazon = float(math.floor(budget * AMAZON_SHARE[genre] + 0.5))
    return amazon, budget - amazon


def scan_budgets(params: PeriodParams) -> np.ndarray:
    """返回网格上每个预算对应的净利润"""
    return np.array([period_profit(float(budget), params) for budget in BUDGET_GRID])


def optimize_budget(params: PeriodParams, genre: Genre, is_launch: bool) -> BudgetChoice:
    """
    选择当期利润最大的广告预算

    Args:
        params: 参数包（自然销量不含幽灵模式惩罚）
        genre: 书籍类型，决定平台拆分
        is_launch: 是否首发期

    Returns:
        BudgetChoice
    """
    profits = scan_budgets(params)
    # argmax 返回首个最大值，即同利润下最小的预算
    best_index = int(np.argmax(profits))
    best_budget = float(BUDGET_GRID[best_index])
    best_profit = float(profits[best_index])

    # 非首发期不为亏损投放：零预算不更差时选择零预算。
    # argmax 已保证 best_profit >= profits[0]，同值时本就落在 0，
    # 因此该分支不会改变结果；亏损时仍保留亏损最小的预算
    if best_profit < 0 and not is_launch:
        zero_profit = float(profits[0])
        if zero_profit >= best_profit:
            best_budget = 0.0
            best_profit = zero_profit

    amazon_spend, facebook_spend = split_budget(best_budget, genre)
    return BudgetChoice(
        budget=best_budget,
        profit=best_profit,
        amazon_spend=amazon_spend,
        facebook_spend=facebook_spend,
    )
