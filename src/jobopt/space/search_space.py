# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: search_space.py
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

from typing import Callable, Optional, Protocol, Sequence, TypeVar, Union, runtime_checkable

import numpy as np

P = TypeVar("P")


@runtime_checkable
class SearchSpace(Protocol[P]):
    """
    What the optimizers need from a space. ParameterSpace and
    MultiJobParameterSpace both satisfy it as they are.
    """

    def empty_point(self) -> P:
        ...

    def num_dimensions(self) -> int:
        ...

    def num_unique_points(self) -> int:
        ...

    def random_point(self, rng: Optional[np.random.Generator] = None) -> P:
        ...

    def random_point_near(self, center: P, scale: float, rng: Optional[np.random.Generator] = None) -> P:
        ...

    def grid(self, random: bool, max_values_per_dim: int, rng: Optional[np.random.Generator] = None) -> Sequence[P]:
        ...


@runtime_checkable
class CostEngine(Protocol[P]):
    """Cost of a candidate point; lower is better."""

    def cost(self, point: P) -> float:
        ...


CostFunction = Union[CostEngine, Callable[[P], float]]
