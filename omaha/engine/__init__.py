from .runouts import exhaustive_runouts, monte_carlo_runouts, runout_count, unseen_pool
from .resolver import RoundOutcome, resolve_board
from .accumulator import EquityAccumulator, EquityCounters, EquityResult, PlayerEquity, TieCounting
from .config import RunConfig
from .equity import run_equity

__all__ = [
    "exhaustive_runouts",
    "monte_carlo_runouts",
    "runout_count",
    "unseen_pool",
    "RoundOutcome",
    "resolve_board",
    "EquityAccumulator",
    "EquityCounters",
    "EquityResult",
    "PlayerEquity",
    "TieCounting",
    "RunConfig",
    "run_equity",
]
