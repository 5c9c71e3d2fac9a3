from __future__ import annotations


class EquityError(Exception):
    """Base class for everything the equity engine raises on purpose."""


class InvalidInput(EquityError, ValueError):
    """Malformed hands, board or dead cards, or bad run options.

    Raised before any board is generated.
    """


class EvaluationError(EquityError, ValueError):
    """The hand evaluator rejected a hole/board pair. Fatal for the run."""


class DegenerateRun(EquityError):
    """No boards were evaluated, so there are no percentages to report."""
