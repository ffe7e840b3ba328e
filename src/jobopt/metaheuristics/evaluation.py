# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: evaluation.py
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
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from jobopt.errors import CostEvaluationError
from jobopt.space.search_space import CostEngine, CostFunction

P = TypeVar("P")


class StopReason(str, Enum):
    EMPTY_SPACE = "empty_space"
    FULL_ENUMERATION = "full_enumeration"
    MAX_EVALUATIONS = "max_evaluations"
    NO_IMPROVEMENT = "no_improvement"
    DEADLINE = "deadline"

    def __str__(self) -> str:
        return self.value


@dataclass
class SearchStats:
    """Diagnostics of the last search run. Never read back by the search."""
    evaluations: int = 0
    exploitations: int = 0
    stop_reason: Optional[StopReason] = None
    best_cost: Optional[float] = None
    threshold_history: List[float] = field(default_factory=list)


class CostEvaluator:
    """
    Calls the cost engine one point at a time and counts the calls.

    Any failure of the engine, including a NaN cost, ends the search with a
    ``CostEvaluationError`` carrying the offending point.
    """

    def __init__(self, cost_engine: CostFunction):
        self._cost = cost_engine.cost if isinstance(cost_engine, CostEngine) else cost_engine
        self.evaluations: int = 0

    def __call__(self, point: Any) -> float:
        self.evaluations += 1
        try:
            value = float(self._cost(point))
        except CostEvaluationError:
            raise
        except Exception as exc:
            raise CostEvaluationError(point, f"{type(exc).__name__}: {exc}") from exc

        if math.isnan(value):
            raise CostEvaluationError(point, "cost is NaN")
        return value


def find_best_space_point(points: Sequence[P], evaluate: CostEvaluator) -> Tuple[P, float]:
    """Evaluate every point in order and return the first one with the lowest cost."""
    if not points:
        raise ValueError("No points to evaluate")

    costs = np.array([evaluate(point) for point in points], dtype=float)
    best = int(np.argmin(costs))
    return points[best], float(costs[best])
