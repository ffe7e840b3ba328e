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

from jobopt.errors import (
    JobOptError,
    InvalidDomainError,
    InvalidSamplingFractionError,
    CostEvaluationError,
)
from jobopt.config import RRSSettings, FullEnumSettings, JobOptimizerSettings
from jobopt.parameters import (
    Cardinality,
    UNBOUNDED,
    HadoopParameter,
    TaskEffect,
    ParameterDescriptor,
    BooleanParamDescriptor,
    IntegerParamDescriptor,
    ContinuousParamDescriptor,
    ListParamDescriptor,
    set_random_seed,
    reset_random_source,
)
from jobopt.space import (
    ParameterSpace,
    ParameterSpacePoint,
    MultiJobParameterSpace,
    MultiJobParamSpacePoint,
    SearchSpace,
    CostEngine,
)
from jobopt.metaheuristics import RecursiveRandomSearch, FullEnumeration, SearchStats, StopReason
from jobopt.optimizer import JobOptimizer, ConfigurationCostEngine

__version__ = "0.1.0"

__all__ = [
    "JobOptError",
    "InvalidDomainError",
    "InvalidSamplingFractionError",
    "CostEvaluationError",
    "RRSSettings",
    "FullEnumSettings",
    "JobOptimizerSettings",
    "Cardinality",
    "UNBOUNDED",
    "HadoopParameter",
    "TaskEffect",
    "ParameterDescriptor",
    "BooleanParamDescriptor",
    "IntegerParamDescriptor",
    "ContinuousParamDescriptor",
    "ListParamDescriptor",
    "set_random_seed",
    "reset_random_source",
    "ParameterSpace",
    "ParameterSpacePoint",
    "MultiJobParameterSpace",
    "MultiJobParamSpacePoint",
    "SearchSpace",
    "CostEngine",
    "RecursiveRandomSearch",
    "FullEnumeration",
    "SearchStats",
    "StopReason",
    "JobOptimizer",
    "ConfigurationCostEngine",
]
