"""
定价与版税模块

定价档位（按质量分）：
- quality >= 9: 首发 3.99 / 常规 9.99
- quality >= 5: 首发 2.99 / 常规 7.99
- 其他:         首发 0.99 / 常规 3.99

版税：售价在 [2.99, 9.99]（含边界）内为 70%，否则 35%
"""

from typing import Dict

from ..models.book import Book

ROYALTY_BAND_MIN = 2.99
ROYALTY_BAND_MAX = 9.99
ROYALTY_HIGH = 0.70
ROYALTY_LOW = 0.35


def price_tiers(quality: int) -> Dict[str, float]:
    """
    根据质量分返回定价档位

    Returns:
        {"launch": 首发价, "normal": 常规价}
    """
    if quality >= 9:
        return {"launch": 3.99, "normal": 9.99}
    if quality >= 5:
        return {"launch": 2.99, "normal": 7.99}
    return {"launch": 0.99, "normal": 3.99}


def royalty_rate(price: float) -> float:
    """根据售价返回版税率（边界价格属于 70% 档）"""
    if ROYALTY_BAND_MIN <= price <= ROYALTY_BAND_MAX:
        return ROYALTY_HIGH
    return ROYALTY_LOW


def select_price(book: Book, is_launch: bool) -> float:
    """
    选择当期售价

    首发期用首发价，其他期用常规价；手动定价时使用书籍上的价格
    """
    if book.manual_pricing:
        return book.price_launch if is_launch else book.price_normal

    tiers = price_tiers(book.quality)
    return tiers["launch"] if is_launch else tiers["normal"]
