"""
API 输入配置模型

组合 = 书籍列表 + 输出选项
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from .book import Book


class OutputOptions(BaseModel):
    """输出选项"""
    include_book_breakdown: bool = Field(default=True, description="是否包含单书明细")


class PortfolioConfig(BaseModel):
    """组合配置 - API 输入主结构"""
    books: List[Book] = Field(default_factory=list, description="书籍列表")
    output_options: OutputOptions = Field(default_factory=OutputOptions, description="输出选项")

    def get_book(self, book_id: str) -> Optional[Book]:
        """按 id 查找书籍"""
        for book in self.books:
            if book.id == book_id:
                return book
        return None

