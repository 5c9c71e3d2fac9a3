from __future__ import annotations

import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from omaha.helpers.evaluator import OmahaHiLoEvaluator

from .accumulator import EquityAccumulator, EquityResult, TieCounting
from .config import RunConfig
from .resolver import Evaluator, resolve_board
from .runouts import exhaustive_runouts, monte_carlo_runouts, runout_count

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkerTask:
    """One worker's share of a run. Must stay picklable."""
    hands: Tuple[Tuple[int, ...], ...]
    board: Tuple[int, ...]
    excluded: Tuple[int, ...]
    evaluator: Evaluator
    tie_counting: TieCounting

    # exhaustive: slice of the combination sequence
    start: int = 0
    stop: Optional[int] = None

    # monte carlo: sample count and this worker's own seed
    iterations: Optional[int] = None
    seed: Optional[int] = None


def split_evenly(total: int, parts: int) -> List[Tuple[int, int]]:
    """[start, stop) bounds covering range(total) in `parts` near-equal pieces."""
    base, extra = divmod(total, parts)
    bounds = []
    start = 0
    for i in range(parts):
        size = base + (1 if i < extra else 0)
        bounds.append((start, start + size))
        start += size
    return bounds


def worker_seeds(seed: Optional[int], n: int) -> List[int]:
    """Independent per-worker seeds spawned from one root seed."""
    children = np.random.SeedSequence(seed).spawn(n)
    return [int(child.generate_state(1)[0]) for child in children]


def plan_tasks(config: RunConfig, evaluator: Evaluator) -> List[WorkerTask]:
    common = dict(
        hands=config.hands,
        board=config.board,
        excluded=tuple(sorted(config.excluded)),
        evaluator=evaluator,
        tie_counting=config.tie_counting,
    )

    if config.monte_carlo:
        # validates the board against the pool even when no boards are requested
        runout_count(config.board, config.excluded)
        parts = max(1, min(config.workers, config.iterations))
        seeds = worker_seeds(config.seed, parts)
        return [
            WorkerTask(iterations=stop - start, seed=s, **common)
            for (start, stop), s in zip(split_evenly(config.iterations, parts), seeds)
        ]

    total = runout_count(config.board, config.excluded)
    parts = max(1, min(config.workers, total))
    return [WorkerTask(start=start, stop=stop, **common) for start, stop in split_evenly(total, parts)]


def run_slice(task: WorkerTask) -> EquityAccumulator:
    acc = EquityAccumulator(len(task.hands), task.tie_counting)
    if task.iterations is None:
        boards = exhaustive_runouts(task.board, task.excluded, task.start, task.stop)
    else:
        boards = monte_carlo_runouts(task.board, task.excluded, task.iterations, random.Random(task.seed))

    for board in boards:
        acc.add(resolve_board(task.hands, board, task.evaluator))

    cache = getattr(task.evaluator, "cache", None)
    if cache is not None:
        LOGGER.debug("slice done: %d boards, rank cache %s", acc.hand_count, cache.stats())
    return acc


def run_equity(config: RunConfig, evaluator: Optional[Evaluator] = None) -> EquityResult:
    """
    Evaluate every board the config asks for and return final equities.

    With workers > 1 the boards are split across processes; each fills a
    private accumulator and the results are merged once all of them finish.
    Raises InvalidInput before any work starts, EvaluationError if the
    evaluator fails on any board, DegenerateRun if no board was evaluated.
    """
    if evaluator is None:
        evaluator = OmahaHiLoEvaluator(high_only=config.high_only)

    tasks = plan_tasks(config, evaluator)
    LOGGER.info(
        "%s run: %d players, %d known board cards, %d dead, %d task(s)",
        "monte carlo" if config.monte_carlo else "exhaustive",
        config.n_players,
        len(config.board),
        len(config.dead),
        len(tasks),
    )

    t0 = time.perf_counter()
    if len(tasks) == 1:
        partials = [run_slice(tasks[0])]
    else:
        with ProcessPoolExecutor(max_workers=len(tasks)) as ex:
            partials = list(ex.map(run_slice, tasks))

    total = EquityAccumulator(config.n_players, config.tie_counting)
    for acc in partials:
        total.merge(acc)
    LOGGER.info("evaluated %d boards in %.2fs", total.hand_count, time.perf_counter() - t0)
    return total.finalize()
