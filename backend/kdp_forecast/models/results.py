"""
API 输出结果模型
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class PeriodRecord(BaseModel):
    """半月期结果（单书或组合合并后）"""
    period_key: str = Field(description="期间标识 YYYY-MM-H1|H2")
    label: str = Field(description="期间展示名")
    month_label: str = Field(description="月份展示名")
    is_first_half: bool = Field(description="是否上半月")
    units_sold: int = Field(default=0, description="销量")
    ku_reads: int = Field(default=0, description="KU 阅读次数")
    gross_revenue: float = Field(default=0.0, description="总收入（销售 + KENP + 系列连带）")
    amazon_spend: float = Field(default=0.0, description="Amazon 广告支出")
    facebook_spend: float = Field(default=0.0, description="Facebook 广告支出")
    total_ad_spend: float = Field(default=0.0, description="广告总支出")
    net_profit: float = Field(default=0.0, description="净利润")


class PortfolioSummary(BaseModel):
    """汇总 KPI"""
    total_revenue: float = Field(default=0.0, description="总收入")
    total_ad_spend: float = Field(default=0.0, description="广告总支出")
    total_net_profit: float = Field(default=0.0, description="净利润")
    roi: float = Field(default=0.0, description="投资回报率（%），无支出有收入时为 1000")
    total_units_sold: int = Field(default=0, description="总销量")
    total_ku_reads: int = Field(default=0, description="总 KU 阅读次数")


class Milestones(BaseModel):
    """里程碑"""
    first_profitable_period: Optional[str] = Field(default=None, description="首个盈利期")
    break_even_period: Optional[str] = Field(default=None, description="累计盈亏平衡期")
    peak_revenue_period: Optional[str] = Field(default=None, description="收入峰值期")
    peak_revenue_value: float = Field(default=0.0, description="收入峰值")


class BookProjection(BaseModel):
    """单书预测"""
    book_id: str = Field(description="书籍 id")
    title: str = Field(default="", description="书名")
    launch_period_key: str = Field(description="首发期")
    periods: List[PeriodRecord] = Field(description="24 个半月期结果")
    summary: PortfolioSummary = Field(description="单书汇总")


class SimulationResult(BaseModel):
    """模拟结果 - API 输出主结构"""
    status: str = Field(default="success", description="状态")
    execution_time_ms: int = Field(description="执行时间（毫秒）")
    config_hash: Optional[str] = Field(default=None, description="配置哈希值")

    summary: PortfolioSummary = Field(description="组合汇总")
    milestones: Milestones = Field(description="里程碑")
    periods: List[PeriodRecord] = Field(description="合并后的组合时序")
    books: Optional[List[BookProjection]] = Field(default=None, description="单书明细")


class ValidationResult(BaseModel):
    """参数校验结果"""
    valid: bool = Field(description="是否有效")
    errors: List[str] = Field(default_factory=list, description="错误列表")
    warnings: List[str] = Field(default_factory=list, description="警告列表")
