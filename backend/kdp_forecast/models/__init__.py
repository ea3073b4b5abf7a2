from .book import Genre, Book
from .params import PeriodSlot, PeriodParams
from .config import OutputOptions, PortfolioConfig
from .results import (
    PeriodRecord,
    PortfolioSummary,
    Milestones,
    BookProjection,
    SimulationResult,
    ValidationResult,
)

__all__ = [
    "Genre",
    "Book",
    "PeriodSlot",
    "PeriodParams",
    "OutputOptions",
    "PortfolioConfig",
    "PeriodRecord",
    "PortfolioSummary",
    "Milestones",
    "BookProjection",
    "SimulationResult",
    "ValidationResult",
]
