from .engine import RunConfig, TieCounting, run_equity
from .helpers import DegenerateRun, EquityError, EvaluationError, InvalidInput, OmahaHiLoEvaluator

__version__ = "0.1.0"

__all__ = [
    "RunConfig",
    "TieCounting",
    "run_equity",
    "DegenerateRun",
    "EquityError",
    "EvaluationError",
    "InvalidInput",
    "OmahaHiLoEvaluator",
]
