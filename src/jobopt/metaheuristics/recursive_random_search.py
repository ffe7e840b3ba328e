# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: recursive_random_search.py
#  Copyright (c) 2025 Mariano Garralda Barrio
#  Affiliation: Universidade da Coruña
#  SPDX-License-Identifier: CC-BY-NC-4.0 OR LicenseRef-Commercial
#
#  Associated publication:
#    "A hybrid metaheuristics–Bayesian optimization framework with safe transfer learning for continuous Spark tuning"
#    Mariano Garralda Barrio, Verónica Bolón Canedo, Carlos Eiras Franco
#    Universidade da Coruña, 2025.
#
#  Academic & research use: CC BY-NC 4.0
#    https://creativecommons.org/licenses/by-nc/4.0/
#  Commercial use: requires prior written consent.
#    Contact: mariano.garralda@udc.es
#
#  Distributed on an "AS IS" basis, without warranties or conditions of any kind.
# -----------------------------------------------------------------------------

import math
import time
from typing import List, Optional, Tuple, TypeVar

import numpy as np
from loguru import logger

from jobopt.config import RRSSettings
from jobopt.metaheuristics.evaluation import (
    CostEvaluator,
    SearchStats,
    StopReason,
    find_best_space_point,
)
from jobopt.parameters.random_source import resolve_rng
from jobopt.space.search_space import CostFunction, SearchSpace

P = TypeVar("P")


class RecursiveRandomSearch:
    """
    Recursive Random Search (RRS) black-box optimizer.

    Alternates two phases:
      - exploration: uniform draws over the whole space. A draw whose cost is
        below the exploration threshold marks a promising region.
      - exploitation: local search around a promising point. The sampling
        radius starts at the exploration percentile r and shrinks by c after
        l consecutive draws without improvement, until it falls to s_t.

    The exploration threshold starts at the minimum of the first n draws and
    is then the mean of the per-batch minimums, one batch per n fresh draws.

    The search stops after ceil(150 * d^1.2) evaluations, or after
    ceil(80 * d^1.2) evaluations without improving the best point, d being
    the number of dimensions. Spaces with fewer unique points than n are
    enumerated instead.

    Evaluations are strictly sequential: every decision depends on the cost
    of the previous draw.
    """

    def __init__(self, settings: Optional[RRSSettings] = None):
        self.settings: RRSSettings = settings or RRSSettings()
        self.last_run: Optional[SearchStats] = None

    @property
    def exploration_sample_size(self) -> int:
        return self.settings.exploration_sample_size

    @property
    def exploitation_patience(self) -> int:
        return self.settings.exploitation_patience

    def find_best(self, space: SearchSpace[P], cost_engine: CostFunction) -> P:
        stats = SearchStats()
        self.last_run = stats

        rng = self._run_rng()
        evaluate = CostEvaluator(cost_engine)
        n = self.exploration_sample_size
        dims = space.num_dimensions()

        if dims == 0:
            stats.stop_reason = StopReason.EMPTY_SPACE
            logger.info("[RRS] Nothing to tune: empty space")
            return space.empty_point()

        if space.num_unique_points() < n:
            best, best_cost = find_best_space_point(space.grid(False, n, rng), evaluate)
            self._finish(stats, evaluate, StopReason.FULL_ENUMERATION, best_cost)
            return best

        max_evaluations = math.ceil(150 * dims ** 1.2)
        max_since_improvement = math.ceil(80 * dims ** 1.2)
        deadline = self._deadline()

        # Initial exploration batch
        points: List[P] = []
        costs: List[float] = []
        for _ in range(n):
            point = space.random_point(rng)
            points.append(point)
            costs.append(evaluate(point))

        first = int(np.argmin(costs))
        explore_point, explore_cost = points[first], costs[first]
        best, best_cost = explore_point, explore_cost
        stats.threshold_history.append(explore_cost)
        threshold = explore_cost
        logger.debug(f"[RRS] n={n} l={self.exploitation_patience} d={dims} initial min={explore_cost:.4f}")

        last_improvement = evaluate.evaluations
        exploit = True
        batch_size = 0
        batch_min = math.inf
        stop_reason = StopReason.MAX_EVALUATIONS

        while True:
            if evaluate.evaluations >= max_evaluations:
                stop_reason = StopReason.MAX_EVALUATIONS
                break
            if evaluate.evaluations - last_improvement >= max_since_improvement:
                stop_reason = StopReason.NO_IMPROVEMENT
                break
            if deadline is not None and time.monotonic() >= deadline:
                stop_reason = StopReason.DEADLINE
                logger.warning(f"[RRS] Deadline of {self.settings.max_search_seconds}s reached after {evaluate.evaluations} evaluations")
                break

            if exploit:
                local_point, local_cost = self._exploit(space, evaluate, explore_point, explore_cost, rng)
                stats.exploitations += 1
                if local_cost < best_cost:
                    logger.debug(f"[RRS] New best: {local_cost:.4f} < {best_cost:.4f}")
                    best, best_cost = local_point, local_cost
                    last_improvement = evaluate.evaluations
                exploit = False

            point = space.random_point(rng)
            cost = evaluate(point)
            batch_min = min(batch_min, cost)
            batch_size += 1

            if cost < threshold:
                explore_point, explore_cost = point, cost
                exploit = True

            if batch_size == n:
                stats.threshold_history.append(batch_min)
                threshold = float(np.mean(stats.threshold_history))
                logger.debug(f"[RRS] Batch min={batch_min:.4f} -> threshold={threshold:.4f}")
                batch_size = 0
                batch_min = math.inf

        self._finish(stats, evaluate, stop_reason, best_cost)
        return best

    def _exploit(
            self,
            space: SearchSpace[P],
            evaluate: CostEvaluator,
            start: P,
            start_cost: float,
            rng: np.random.Generator
    ) -> Tuple[P, float]:
        """Shrinking-radius local search around ``start``."""
        settings = self.settings
        patience = self.exploitation_patience
        radius = settings.explore_percentile
        center, center_cost = start, start_cost
        failures = 0

        logger.debug(f"[RRS] Exploitation from cost {start_cost:.4f}")
        while radius > settings.exploit_termination_size:
            candidate = space.random_point_near(center, radius, rng)
            cost = evaluate(candidate)

            if cost < center_cost:
                center, center_cost = candidate, cost
                failures = 0
            else:
                failures += 1

            if failures == patience:
                radius *= settings.exploit_reduction_ratio
                failures = 0

        logger.debug(f"[RRS] Exploitation converged at cost {center_cost:.4f}")
        return center, center_cost

    def _run_rng(self) -> np.random.Generator:
        if self.settings.seed is not None:
            return np.random.default_rng(self.settings.seed)
        return resolve_rng(None)

    def _deadline(self) -> Optional[float]:
        if self.settings.max_search_seconds is None:
            return None
        return time.monotonic() + self.settings.max_search_seconds

    @staticmethod
    def _finish(stats: SearchStats, evaluate: CostEvaluator, reason: StopReason, best_cost: float) -> None:
        stats.evaluations = evaluate.evaluations
        stats.stop_reason = reason
        stats.best_cost = best_cost
        logger.info(f"[RRS] Done: {stats.evaluations} evaluations, best cost {best_cost:.4f}, stop={reason}")
