"""
半月期参数类

- PeriodSlot: 一个 (月偏移, 上/下半月) 状态的日历标识
- PeriodParams: 单期利润函数所需的参数包
"""

from calendar import month_abbr, month_name
from datetime import date


class PeriodSlot:
    """
    半月期日历标识

    period_key 格式为 YYYY-MM-H1 / YYYY-MM-H2，按字符串排序即按时间排序
    """

    def __init__(self, year: int, month: int, half: int, month_offset: int):
        self.year = year
        self.month = month
        self.half = half
        self.month_offset = month_offset

    @property
    def is_first_half(self) -> bool:
        return self.half == 1

    @property
    def period_key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-H{self.half}"

    @property
    def month_label(self) -> str:
        """如 "March 2025" """
        return f"{month_name[self.month]} {self.year}"

    @property
    def label(self) -> str:
        """如 "Mar 2025 H1" """
        return f"{month_abbr[self.month]} {self.year} H{self.half}"

    @classmethod
    def from_offset(cls, launch_date: date, month_offset: int, half: int) -> "PeriodSlot":
        """
        从上架日期 + 月偏移创建

        Args:
            launch_date: 上架日期（只取年月）
            month_offset: 月偏移 0-11
            half: 1 = 上半月, 2 = 下半月
        """
        months = launch_date.year * 12 + (launch_date.month - 1) + month_offset
        return cls(year=months // 12, month=months % 12 + 1, half=half, month_offset=month_offset)

    def __repr__(self) -> str:
        return f"PeriodSlot({self.period_key})"


class PeriodParams:
    """
    单期利润函数参数包

    优化器的目标函数和最终记账共用同一个参数包
    """

    def __init__(
        self,
        price: float,
        royalty_rate: float,
        effective_cpa: float,
        organic_sales: float,
        word_count: int,
        reads_per_sale_base: float,
        is_series: bool = False,
        series_ltv: float = 0.0,
    ):
        self.price = price
        self.royalty_rate = royalty_rate
        self.effective_cpa = effective_cpa
        self.organic_sales = organic_sales
        self.word_count = word_count
        self.reads_per_sale_base = reads_per_sale_base
        self.is_series = is_series
        self.series_ltv = series_ltv

    def with_organic_sales(self, organic_sales: float) -> "PeriodParams":
        """返回仅替换自然销量的新参数包（用于幽灵模式惩罚）"""
        return PeriodParams(
            price=self.price,
            royalty_rate=self.royalty_rate,
            effective_cpa=self.effective_cpa,
            organic_sales=organic_sales,
            word_count=self.word_count,
            reads_per_sale_base=self.reads_per_sale_base,
            is_series=self.is_series,
            series_ltv=self.series_ltv,
        )
