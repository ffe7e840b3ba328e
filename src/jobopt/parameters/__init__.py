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

from jobopt.parameters.cardinality import Cardinality, UNBOUNDED
from jobopt.parameters.hadoop_parameters import HadoopParameter, TaskEffect
from jobopt.parameters.random_source import (
    get_random_source,
    set_random_seed,
    reset_random_source,
)
from jobopt.parameters.descriptors import (
    ParameterDescriptor,
    BooleanParamDescriptor,
    IntegerParamDescriptor,
    ContinuousParamDescriptor,
    ListParamDescriptor,
)

__all__ = [
    "Cardinality",
    "UNBOUNDED",
    "HadoopParameter",
    "TaskEffect",
    "ParameterDescriptor",
    "BooleanParamDescriptor",
    "IntegerParamDescriptor",
    "ContinuousParamDescriptor",
    "ListParamDescriptor",
    "get_random_source",
    "set_random_seed",
    "reset_random_source",
]
