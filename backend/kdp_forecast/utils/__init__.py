from .validation import validate_book, validate_portfolio

__all__ = ["validate_book", "validate_portfolio"]
