# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: multi_job_space.py
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
from typing import Dict, List, Optional

import numpy as np
from loguru import logger

from jobopt.parameters.cardinality import Cardinality
from jobopt.parameters.descriptors import check_count, check_scale
from jobopt.space.parameter_space import ParameterSpace
from jobopt.space.point import MultiJobParamSpacePoint


class MultiJobParameterSpace:
    """
    Joint search space over several jobs (e.g. the jobs of a workflow), one
    ParameterSpace per integer job id. Job order is registration order.
    """

    def __init__(self, spaces: Optional[Dict[int, ParameterSpace]] = None):
        self._spaces: Dict[int, ParameterSpace] = {}
        for job_id, space in (spaces or {}).items():
            self.add_space(job_id, space)

    def add_space(self, job_id: int, space: ParameterSpace) -> None:
        """Register the space of a job; an existing id gets its space replaced."""
        self._spaces[int(job_id)] = space

    def get_space(self, job_id: int) -> ParameterSpace:
        return self._spaces[job_id]

    @property
    def job_ids(self) -> List[int]:
        return list(self._spaces)

    def __len__(self) -> int:
        return len(self._spaces)

    def __repr__(self) -> str:
        body = ", ".join(f"{job_id}: {space}" for job_id, space in self._spaces.items())
        return f"MultiJobParameterSpace({body})"

    def num_dimensions(self) -> int:
        return sum(space.num_dimensions() for space in self._spaces.values())

    def cardinality(self) -> Cardinality:
        return Cardinality.product(space.cardinality() for space in self._spaces.values())

    def num_unique_points(self) -> int:
        return self.cardinality().to_int()

    def empty_point(self) -> MultiJobParamSpacePoint:
        return MultiJobParamSpacePoint({
            job_id: space.empty_point() for job_id, space in self._spaces.items()
        })

    def random_point(self, rng: Optional[np.random.Generator] = None) -> MultiJobParamSpacePoint:
        return MultiJobParamSpacePoint({
            job_id: space.random_point(rng) for job_id, space in self._spaces.items()
        })

    def random_point_near(
            self,
            center: MultiJobParamSpacePoint,
            scale: float,
            rng: Optional[np.random.Generator] = None
    ) -> MultiJobParamSpacePoint:
        check_scale(scale)
        return MultiJobParamSpacePoint({
            job_id: space.random_point_near(center.job_space_point(job_id), scale, rng)
            for job_id, space in self._spaces.items()
        })

    def grid(
            self,
            random: bool,
            max_values_per_dim: int,
            rng: Optional[np.random.Generator] = None
    ) -> List[MultiJobParamSpacePoint]:
        """
        Cartesian product of the per-job grids. ``max_values_per_dim`` bounds
        each descriptor, not the size of the result.
        """
        check_count(max_values_per_dim)
        job_ids = list(self._spaces)
        grids = [space.grid(random, max_values_per_dim, rng) for space in self._spaces.values()]
        points = [MultiJobParamSpacePoint(dict(zip(job_ids, combo))) for combo in itertools.product(*grids)]

        logger.debug(f"[Space] Joint grid of {len(points)} points over {len(job_ids)} jobs")
        return points
