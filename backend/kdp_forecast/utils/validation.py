"""
参数校验工具

核心计算不做校验（超范围输入按公式外推），这里只给出提示
"""

from typing import List, Set
from ..models.book import Book
from ..models.config import PortfolioConfig
from ..models.results import ValidationResult
from ..core.pricing import ROYALTY_BAND_MIN, ROYALTY_BAND_MAX


def validate_book(book: Book) -> ValidationResult:
    """
    校验单本书

    Returns:
        ValidationResult 对象
    """
    errors: List[str] = []
    warnings: List[str] = []
    name = book.title or book.id

    # 1. 质量分
    if not (1 <= book.quality <= 10):
        errors.append(f"《{name}》质量分必须在 1-10 之间，当前为 {book.quality}")

    # 2. 手动定价
    if book.manual_pricing:
        if book.price_launch <= 0 or book.price_normal <= 0:
            errors.append(f"《{name}》手动价格必须大于 0")
        else:
            for label, price in (("首发价", book.price_launch), ("常规价", book.price_normal)):
                if not (ROYALTY_BAND_MIN <= price <= ROYALTY_BAND_MAX):
                    warnings.append(
                        f"《{name}》{label} {price:.2f} 不在 70% 版税区间 "
                        f"[{ROYALTY_BAND_MIN}, {ROYALTY_BAND_MAX}]，将按 35% 计算"
                    )
            if book.price_launch > book.price_normal:
                warnings.append(f"《{name}》首发价高于常规价")

    # 3. 系列书
    if book.is_series and book.series_ltv <= 0:
        warnings.append(f"《{name}》标记为系列书但系列连带价值为 0")

    # 4. 广告策略
    if book.auto_optimize:
        if book.monthly_ad_budget > 0:
            warnings.append(f"《{name}》已开启自动优化，固定广告预算将被忽略")
    elif book.monthly_ad_budget <= 0:
        warnings.append(f"《{name}》广告预算为 0，全年自然销量将按幽灵模式折减 40%")

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def validate_portfolio(config: PortfolioConfig) -> ValidationResult:
    """
    校验组合配置

    Returns:
        ValidationResult 对象
    """
    errors: List[str] = []
    warnings: List[str] = []

    if not config.books:
        warnings.append("组合中没有书籍，结果将全部为 0")

    # 书籍 id 必须唯一
    seen: Set[str] = set()
    for book in config.books:
        if book.id in seen:
            errors.append(f"书籍 id 重复: {book.id}")
        seen.add(book.id)

        result = validate_book(book)
        errors.extend(result.errors)
        warnings.extend(result.warnings)

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )
