# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: __init__.py
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

from jobopt.space.point import ParameterSpacePoint, MultiJobParamSpacePoint
from jobopt.space.parameter_space import ParameterSpace
from jobopt.space.multi_job_space import MultiJobParameterSpace
from jobopt.space.search_space import SearchSpace, CostEngine, CostFunction

__all__ = [
    "ParameterSpacePoint",
    "MultiJobParamSpacePoint",
    "ParameterSpace",
    "MultiJobParameterSpace",
    "SearchSpace",
    "CostEngine",
    "CostFunction",
]
