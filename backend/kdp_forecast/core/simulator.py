"""
主模拟器模块

单书按 24 个半月期顺序执行：生效判定 -> 定价 -> 需求 -> 预算选择 -> 记账
组合层面再按 period_key 合并各书结果
"""

import time
import hashlib
import logging
from datetime import date
from typing import List, Tuple

from ..models.book import Book
from ..models.config import PortfolioConfig
from ..models.params import PeriodSlot, PeriodParams
from ..models.results import (
    PeriodRecord,
    BookProjection,
    SimulationResult,
    PortfolioSummary,
)
from .pricing import royalty_rate, select_price
from .demand import calc_demand, apply_ghost_mode, reads_per_sale
from .profit import evaluate_period
from .optimizer import optimize_budget
from .aggregator import aggregate_periods, summarize_portfolio, find_milestones

logger = logging.getLogger(__name__)

MONTHS = 12
HALVES = (1, 2)
# 上架日晚于该日时，上架月的上半月不生效
LAUNCH_GATE_DAY = 10


def period_slots(launch_date: date) -> List[PeriodSlot]:
    """按时间顺序生成 24 个半月期"""
    return [
        PeriodSlot.from_offset(launch_date, month_offset, half)
        for month_offset in range(MONTHS)
        for half in HALVES
    ]


class BookSimulator:
    """单书模拟器"""

    def __init__(self, book: Book):
        self.book = book
        # 首个生效期的序号：上架日 <= 10 为 (0, H1)，否则为 (0, H2)
        self.launch_offset = 1 if book.launch_day > LAUNCH_GATE_DAY else 0

    def is_active(self, slot: PeriodSlot) -> bool:
        """只有上架月上半月可能不生效"""
        return not (slot.month_offset == 0 and slot.is_first_half and self.launch_offset == 1)

    def age_of(self, slot: PeriodSlot) -> int:
        """期龄：从首个生效期起算的半月数"""
        return 2 * slot.month_offset + (slot.half - 1) - self.launch_offset

    def build_params(self, age: int, is_launch: bool) -> PeriodParams:
        """构建当期参数包（自然销量不含幽灵模式惩罚）"""
        book = self.book
        demand = calc_demand(book, age)
        price = select_price(book, is_launch)

        return PeriodParams(
            price=price,
            royalty_rate=royalty_rate(price),
            effective_cpa=demand.effective_cpa,
            organic_sales=demand.organic_sales,
            word_count=book.word_count,
            reads_per_sale_base=reads_per_sale(book.quality),
            is_series=book.is_series,
            series_ltv=book.series_ltv,
        )

    def choose_spend(self, params: PeriodParams, age: int) -> Tuple[float, float]:
        """
        选择当期 Amazon / Facebook 支出

        - 自动优化: 网格搜索利润最大的预算
        - 固定分配: 月度预算对半分到两个半月
        """
        book = self.book
        if book.auto_optimize:
            choice = optimize_budget(params, book.genre, is_launch=age == 0)
            logger.debug(
                "书籍 %s 期龄 %d 选择预算 %.0f（利润 %.2f）",
                book.id, age, choice.budget, choice.profit,
            )
            return choice.amazon_spend, choice.facebook_spend

        return book.amazon_ad_budget / 2, book.facebook_ad_budget / 2

    def simulate_period(self, slot: PeriodSlot) -> PeriodRecord:
        """
        模拟单期

        Returns:
            PeriodRecord 对象
        """
        record = PeriodRecord(
            period_key=slot.period_key,
            label=slot.label,
            month_label=slot.month_label,
            is_first_half=slot.is_first_half,
        )
        if not self.is_active(slot):
            return record

        age = self.age_of(slot)
        is_launch = age == 0

        # 1. 参数包 & 预算
        params = self.build_params(age, is_launch)
        amazon_spend, facebook_spend = self.choose_spend(params, age)
        total_ad_spend = amazon_spend + facebook_spend

        # 2. 预算确定后再施加幽灵模式惩罚
        organic_sales = apply_ghost_mode(params.organic_sales, total_ad_spend)
        outcome = evaluate_period(total_ad_spend, params.with_organic_sales(organic_sales))

        # 3. 记账
        record.units_sold = outcome.units_sold
        record.ku_reads = outcome.ku_reads
        record.gross_revenue = outcome.gross_revenue
        record.amazon_spend = amazon_spend
        record.facebook_spend = facebook_spend
        record.total_ad_spend = total_ad_spend
        record.net_profit = outcome.gross_revenue - total_ad_spend
        return record

    def simulate(self) -> List[PeriodRecord]:
        """按时间顺序模拟全部 24 期"""
        return [self.simulate_period(slot) for slot in period_slots(self.book.launch_date)]

    @property
    def launch_period_key(self) -> str:
        return period_slots(self.book.launch_date)[self.launch_offset].period_key


def simulate_book(book: Book) -> List[PeriodRecord]:
    """
    模拟单本书 12 个月（24 个半月期）

    相同输入总是得到相同输出，不修改 book
    """
    logger.debug("开始模拟书籍 %s (%s)", book.id, book.title)
    return BookSimulator(book).simulate()


def project_book(book: Book) -> BookProjection:
    """单书预测（期间结果 + 单书汇总）"""
    simulator = BookSimulator(book)
    periods = simulator.simulate()
    return BookProjection(
        book_id=book.id,
        title=book.title,
        launch_period_key=simulator.launch_period_key,
        periods=periods,
        summary=summarize_portfolio(periods),
    )


def aggregate_portfolio(books: List[Book]) -> Tuple[List[PeriodRecord], PortfolioSummary]:
    """
    模拟全部书籍并合并

    Returns:
        (合并后的期间结果, 组合汇总)
    """
    periods = aggregate_periods(simulate_book(book) for book in books)
    return periods, summarize_portfolio(periods)


def run_simulation(config: PortfolioConfig) -> SimulationResult:
    """
    运行组合模拟

    Args:
        config: 组合配置

    Returns:
        SimulationResult 对象
    """
    start_time = time.time()

    projections = [project_book(book) for book in config.books]
    periods = aggregate_periods(projection.periods for projection in projections)
    summary = summarize_portfolio(periods)

    execution_time_ms = int((time.time() - start_time) * 1000)
    logger.info(
        "组合模拟完成: %d 本书, 收入 %.2f, 广告支出 %.2f, ROI %.1f%%",
        len(config.books), summary.total_revenue, summary.total_ad_spend, summary.roi,
    )

    return SimulationResult(
        status="success",
        execution_time_ms=execution_time_ms,
        config_hash=hashlib.md5(config.model_dump_json().encode()).hexdigest()[:8],
        summary=summary,
        milestones=find_milestones(periods),
        periods=periods,
        books=projections if config.output_options.include_book_breakdown else None,
    )
