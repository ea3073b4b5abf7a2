"""
书籍输入模型

一本书的静态属性 + 广告策略，整个模拟过程中不可变
"""

import uuid
from datetime import date
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class Genre(str, Enum):
    """书籍类型"""
    FICTION = "fiction"
    NON_FICTION = "non_fiction"
    BUSINESS = "business"


class Book(BaseModel):
    """单本书配置"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex, description="书籍唯一标识")
    title: str = Field(default="", description="书名（仅用于展示）")
    launch_date: date = Field(default_factory=date.today, description="上架日期，日期决定首个半月是否生效")
    word_count: int = Field(gt=0, default=50000, description="字数，决定 KU 阅读页数收益")
    # 质量分不在模型层校验范围，超出 1-10 时核心按公式外推，由 validate_portfolio 报错
    quality: int = Field(default=7, description="质量分 1-10")
    initial_reviews: int = Field(ge=0, default=0, description="初始评论数")
    genre: Genre = Field(default=Genre.FICTION, description="书籍类型")

    is_series: bool = Field(default=False, description="是否为系列书")
    series_ltv: float = Field(ge=0, default=0.0, description="系列连带价值（每售出一本带来的额外利润）")

    manual_pricing: bool = Field(default=False, description="是否手动定价")
    price_launch: float = Field(default=2.99, description="手动首发价")
    price_normal: float = Field(default=7.99, description="手动常规价")

    amazon_ad_budget: float = Field(ge=0, default=0.0, description="Amazon 月度广告预算（仅固定分配模式）")
    facebook_ad_budget: float = Field(ge=0, default=0.0, description="Facebook 月度广告预算（仅固定分配模式）")
    auto_optimize: bool = Field(default=False, description="是否自动优化每期广告预算")

    @property
    def launch_day(self) -> int:
        """上架日（月内第几天）"""
        return self.launch_date.day

    @property
    def monthly_ad_budget(self) -> float:
        """固定分配模式下的月度总预算"""
        return self.amazon_ad_budget + self.facebook_ad_budget
