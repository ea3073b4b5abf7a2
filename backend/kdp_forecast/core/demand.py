"""
需求模块

按书籍属性和期龄 a（从首个生效半月期起算的半月数）计算：

- 社会认同: socialProof = 1 + ln(1 + reviews) * 0.05
- 有效 CPA: effectiveCPA = (baseCPA / socialProof) * genreFactor * adFatigue
    - baseCPA = max(1.5, 12 - quality)
    - adFatigue = 1 + a * 0.025（每半月 CPA 上升约 2.5%）
- 自然销量: organic = baseOrganic * launchMultiplier * retention^(a/2)
    - baseOrganic = quality * 4 * socialProof / 2（月基线折半）
    - retention = max(0.5, 1 - (11 - quality) * 0.02)，按月衰减
- 幽灵模式: 当期无广告支出时自然销量 * 0.6
"""

from typing import Dict
import numpy as np
from pydantic import BaseModel

from ..models.book import Book, Genre

GENRE_FACTORS: Dict[Genre, float] = {
    Genre.FICTION: 0.8,
    Genre.NON_FICTION: 1.1,
    Genre.BUSINESS: 1.5,
}

# 首发蜜月期倍数，按期龄索引，之后为 1.0
LAUNCH_MULTIPLIERS = (4.0, 2.5, 1.5, 1.2)

SOCIAL_PROOF_WEIGHT = 0.05
AD_FATIGUE_PER_PERIOD = 0.025
DECAY_SEVERITY = 0.02
MIN_RETENTION = 0.5
MIN_BASE_CPA = 1.5
GHOST_MODE_FACTOR = 0.6


class DemandFactors(BaseModel):
    """单期需求因子"""
    age: int
    social_proof: float
    genre_factor: float
    base_cpa: float
    ad_fatigue: float
    effective_cpa: float
    launch_multiplier: float
    retention_rate: float
    time_decay_factor: float
    base_organic: float
    organic_sales: float


def calc_social_proof(initial_reviews: int) -> float:
    """评论数带来的对数型可信度加成"""
    return float(1.0 + np.log(1 + initial_reviews) * SOCIAL_PROOF_WEIGHT)


def calc_launch_multiplier(age: int) -> float:
    if 0 <= age < len(LAUNCH_MULTIPLIERS):
        return LAUNCH_MULTIPLIERS[age]
    return 1.0


def calc_retention_rate(quality: int) -> float:
    """月保留率，质量越高衰减越慢，下限 50%"""
    return max(MIN_RETENTION, 1.0 - (11 - quality) * DECAY_SEVERITY)


def reads_per_sale(quality: int) -> float:
    """每单位销量对应的 KU 阅读次数"""
    return 1.5 if quality > 6 else 0.8


def calc_demand(book: Book, age: int) -> DemandFactors:
    """
    计算单期需求因子（不含幽灵模式惩罚）

    Args:
        book: 书籍
        age: 期龄（半月数，首个生效期为 0）

    Returns:
        DemandFactors 对象
    """
    social_proof = calc_social_proof(book.initial_reviews)
    genre_factor = GENRE_FACTORS[book.genre]

    # 1. 付费获客成本
    base_cpa = max(MIN_BASE_CPA, 12.0 - book.quality)
    ad_fatigue = 1.0 + age * AD_FATIGUE_PER_PERIOD
    effective_cpa = (base_cpa / social_proof) * genre_factor * ad_fatigue

    # 2. 自然销量（蜜月 + 长尾衰减）
    launch_multiplier = calc_launch_multiplier(age)
    retention_rate = calc_retention_rate(book.quality)
    time_decay_factor = float(np.power(retention_rate, age / 2.0))
    base_organic = (book.quality * 4 * social_proof) / 2.0
    organic_sales = base_organic * launch_multiplier * time_decay_factor

    return DemandFactors(
        age=age,
        social_proof=social_proof,
        genre_factor=genre_factor,
        base_cpa=base_cpa,
        ad_fatigue=ad_fatigue,
        effective_cpa=effective_cpa,
        launch_multiplier=launch_multiplier,
        retention_rate=retention_rate,
        time_decay_factor=time_decay_factor,
        base_organic=base_organic,
        organic_sales=organic_sales,
    )


def apply_ghost_mode(organic_sales: float, total_ad_spend: float) -> float:
    """无广告支出时自然曝光同样下降"""
    if total_ad_spend <= 0:
        return organic_sales * GHOST_MODE_FACTOR
    return organic_sales
