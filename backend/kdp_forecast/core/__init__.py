from .pricing import price_tiers, royalty_rate
from .demand import calc_demand
from .profit import period_profit, evaluate_period
from .optimizer import optimize_budget, split_budget
from .aggregator import aggregate_periods, summarize_portfolio
from .simulator import simulate_book, aggregate_portfolio, run_simulation

__all__ = [
    "price_tiers",
    "royalty_rate",
    "calc_demand",
    "period_profit",
    "evaluate_period",
    "optimize_budget",
    "split_budget",
    "aggregate_periods",
    "summarize_portfolio",
    "simulate_book",
    "aggregate_portfolio",
    "run_simulation",
]
