# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: full_enumeration.py
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

from typing import Optional, TypeVar

import numpy as np
from loguru import logger

from jobopt.config import FullEnumSettings
from jobopt.metaheuristics.evaluation import (
    CostEvaluator,
    SearchStats,
    StopReason,
    find_best_space_point,
)
from jobopt.parameters.random_source import resolve_rng
from jobopt.space.search_space import CostFunction, SearchSpace

P = TypeVar("P")


class FullEnumeration:
    """
    Evaluates every point of the space grid, ``num_values_per_param`` values
    per dimension, and keeps the first point with the lowest cost.
    """

    def __init__(self, settings: Optional[FullEnumSettings] = None):
        self.settings: FullEnumSettings = settings or FullEnumSettings()
        self.last_run: Optional[SearchStats] = None

    def find_best(self, space: SearchSpace[P], cost_engine: CostFunction) -> P:
        stats = SearchStats()
        self.last_run = stats

        if space.num_dimensions() == 0:
            stats.stop_reason = StopReason.EMPTY_SPACE
            logger.info("[FullEnum] Nothing to tune: empty space")
            return space.empty_point()

        rng = np.random.default_rng(self.settings.seed) if self.settings.seed is not None else resolve_rng(None)
        grid = space.grid(self.settings.use_random_values, self.settings.num_values_per_param, rng)
        logger.debug(f"[FullEnum] Evaluating {len(grid)} grid points")

        evaluate = CostEvaluator(cost_engine)
        best, best_cost = find_best_space_point(grid, evaluate)

        stats.evaluations = evaluate.evaluations
        stats.stop_reason = StopReason.FULL_ENUMERATION
        stats.best_cost = best_cost
        logger.info(f"[FullEnum] Done: {stats.evaluations} evaluations, best cost {best_cost:.4f}")
        return best
