"""
组合汇总模块

按 period_key 合并多本书的半月期结果，并计算汇总 KPI：

ROI = (总收入 - 广告总支出) / 广告总支出 * 100
- 广告支出为 0 且有收入时返回 1000（视为无穷大，封顶展示）
- 两者都为 0 时返回 0
"""

import logging
from typing import Dict, Iterable, List

from ..models.results import PeriodRecord, PortfolioSummary, Milestones

logger = logging.getLogger(__name__)

ROI_CAP = 1000.0

SUMMED_FIELDS = (
    "units_sold",
    "ku_reads",
    "gross_revenue",
    "amazon_spend",
    "facebook_spend",
    "total_ad_spend",
    "net_profit",
)


def aggregate_periods(per_book_periods: Iterable[List[PeriodRecord]]) -> List[PeriodRecord]:
    """
    按 period_key 合并各书的期间结果

    展示字段（label / month_label / is_first_half）取首次出现的记录，
    数值字段求和。输入记录不会被修改。

    Args:
        per_book_periods: 每本书的期间结果列表

    Returns:
        按 period_key 升序排列的合并结果
    """
    merged: Dict[str, PeriodRecord] = {}

    for periods in per_book_periods:
        for record in periods:
            existing = merged.get(record.period_key)
            if existing is None:
                merged[record.period_key] = record.model_copy()
                continue
            for field in SUMMED_FIELDS:
                setattr(existing, field, getattr(existing, field) + getattr(record, field))

    logger.debug("合并后共 %d 个期间", len(merged))

    # YYYY-MM-H1/H2 补零格式，字典序即时间序
    return [merged[key] for key in sorted(merged)]


def calc_roi(total_revenue: float, total_ad_spend: float) -> float:
    """计算 ROI（%）"""
    if total_ad_spend > 0:
        return (total_revenue - total_ad_spend) / total_ad_spend * 100
    return ROI_CAP if total_revenue > 0 else 0.0


def summarize_portfolio(periods: List[PeriodRecord]) -> PortfolioSummary:
    """
    汇总期间结果

    Returns:
        PortfolioSummary 对象
    """
    total_revenue = 0.0
    total_ad_spend = 0.0
    total_net_profit = 0.0
    total_units_sold = 0
    total_ku_reads = 0

    for record in periods:
        total_revenue += record.gross_revenue
        total_ad_spend += record.total_ad_spend
        total_net_profit += record.net_profit
        total_units_sold += record.units_sold
        total_ku_reads += record.ku_reads

    return PortfolioSummary(
        total_revenue=total_revenue,
        total_ad_spend=total_ad_spend,
        total_net_profit=total_net_profit,
        roi=calc_roi(total_revenue, total_ad_spend),
        total_units_sold=total_units_sold,
        total_ku_reads=total_ku_reads,
    )


def find_milestones(periods: List[PeriodRecord]) -> Milestones:
    """
    查找里程碑

    - 首个盈利期: 首个 net_profit > 0 的期间
    - 盈亏平衡期: 出现过非零期间后，累计净利润首次 >= 0 的期间
    - 收入峰值期: gross_revenue 最大的期间（同值取更早者）
    """
    first_profitable = None
    break_even = None
    peak_period = None
    peak_value = 0.0

    cumulative_profit = 0.0
    seen_activity = False

    for record in periods:
        cumulative_profit += record.net_profit
        if record.gross_revenue != 0 or record.total_ad_spend != 0:
            seen_activity = True

        if record.net_profit > 0 and first_profitable is None:
            first_profitable = record.period_key

        if seen_activity and cumulative_profit >= 0 and break_even is None:
            break_even = record.period_key

        if peak_period is None or record.gross_revenue > peak_value:
            peak_period = record.period_key
            peak_value = record.gross_revenue

    return Milestones(
        first_profitable_period=first_profitable,
        break_even_period=break_even,
        peak_revenue_period=peak_period,
        peak_revenue_value=peak_value,
    )
