# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: parameter_space.py
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

import itertools
from typing import Any, Dict, Iterable, Iterator, List, Optional

import numpy as np
from loguru import logger

from jobopt.parameters.cardinality import Cardinality
from jobopt.parameters.descriptors import ParameterDescriptor, check_count, check_scale
from jobopt.parameters.hadoop_parameters import TaskEffect
from jobopt.space.point import ParameterSpacePoint


class ParameterSpace:
    """
    Ordered collection of parameter descriptors for one unit of configuration
    (typically one job). A space with no descriptors is valid and means there
    is nothing to tune.
    """

    def __init__(self, descriptors: Optional[Iterable[ParameterDescriptor]] = None):
        self._descriptors: Dict[str, ParameterDescriptor] = {}
        for descriptor in descriptors or []:
            self.add_parameter_descriptor(descriptor)

    # ---------------- Descriptors ----------------

    def add_parameter_descriptor(self, descriptor: ParameterDescriptor) -> None:
        """Register a descriptor; a descriptor with the same name is replaced."""
        self._descriptors[descriptor.parameter] = descriptor

    def contains(self, name: Any) -> bool:
        return str(name) in self._descriptors

    def get_parameter_descriptor(self, name: Any) -> ParameterDescriptor:
        return self._descriptors[str(name)]

    def remove_parameter_descriptor(self, name: Any) -> Optional[ParameterDescriptor]:
        return self._descriptors.pop(str(name), None)

    def parameter_descriptors(self, effect: Optional[TaskEffect] = None) -> List[ParameterDescriptor]:
        if effect is None:
            return list(self._descriptors.values())
        return [d for d in self._descriptors.values() if d.effect == effect]

    def __contains__(self, name: Any) -> bool:
        return self.contains(name)

    def __iter__(self) -> Iterator[ParameterDescriptor]:
        return iter(list(self._descriptors.values()))

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"ParameterSpace({', '.join(sorted(self._descriptors))})"

    # ---------------- Size ----------------

    def num_dimensions(self) -> int:
        return len(self._descriptors)

    def cardinality(self) -> Cardinality:
        return Cardinality.product(d.num_unique_values() for d in self._descriptors.values())

    def num_unique_points(self) -> int:
        return self.cardinality().to_int()

    # ---------------- Points ----------------

    def empty_point(self) -> ParameterSpacePoint:
        return ParameterSpacePoint()

    def random_point(self, rng: Optional[np.random.Generator] = None) -> ParameterSpacePoint:
        return ParameterSpacePoint({
            name: descriptor.random_value(rng)
            for name, descriptor in self._descriptors.items()
        })

    def random_point_near(
            self,
            center: ParameterSpacePoint,
            scale: float,
            rng: Optional[np.random.Generator] = None
    ) -> ParameterSpacePoint:
        """
        Sample every dimension within ``scale`` times its own domain width
        around the value it takes in ``center``.
        """
        check_scale(scale)
        return ParameterSpacePoint({
            name: descriptor.random_value_near(center[name], scale, rng)
            for name, descriptor in self._descriptors.items()
        })

    def grid(
            self,
            random: bool,
            max_values_per_dim: int,
            rng: Optional[np.random.Generator] = None
    ) -> List[ParameterSpacePoint]:
        """
        Cartesian product of every descriptor's grid values. The first point
        takes the first value of each descriptor.
        """
        check_count(max_values_per_dim)
        if not self._descriptors:
            return [self.empty_point()]

        names = list(self._descriptors)
        values = [
            descriptor.grid_values(max_values_per_dim, random, rng)
            for descriptor in self._descriptors.values()
        ]
        points = [ParameterSpacePoint(dict(zip(names, combo))) for combo in itertools.product(*values)]

        logger.debug(f"[Space] Grid of {len(points)} points over {len(names)} dimensions (k={max_values_per_dim}, random={random})")
        return points
