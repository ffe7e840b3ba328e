# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: conftest.py
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

import pytest

from jobopt.parameters import (
    BooleanParamDescriptor,
    ContinuousParamDescriptor,
    HadoopParameter,
    IntegerParamDescriptor,
    TaskEffect,
    reset_random_source,
)
from jobopt.space import MultiJobParameterSpace, ParameterSpace


@pytest.fixture(autouse=True)
def fresh_random_source():
    """Seeds set by one test must not leak into the next one."""
    reset_random_source()
    yield
    reset_random_source()


@pytest.fixture
def compress_space() -> ParameterSpace:
    return ParameterSpace([
        BooleanParamDescriptor(parameter=HadoopParameter.COMPRESS_OUT, effect=TaskEffect.REDUCE),
    ])


@pytest.fixture
def combine_sort_space() -> ParameterSpace:
    return ParameterSpace([
        BooleanParamDescriptor(parameter=HadoopParameter.COMBINE, effect=TaskEffect.BOTH),
        IntegerParamDescriptor(parameter=HadoopParameter.SORT_FACTOR, effect=TaskEffect.BOTH, min_value=2, max_value=5),
    ])


@pytest.fixture
def combine_buffer_space() -> ParameterSpace:
    return ParameterSpace([
        BooleanParamDescriptor(parameter=HadoopParameter.COMBINE, effect=TaskEffect.BOTH),
        ContinuousParamDescriptor(
            parameter=HadoopParameter.RED_IN_BUFF_PERC, effect=TaskEffect.REDUCE, min_value=0.0, max_value=1.0),
    ])


@pytest.fixture
def workflow_space(compress_space, combine_sort_space) -> MultiJobParameterSpace:
    space = MultiJobParameterSpace()
    space.add_space(1, compress_space)
    space.add_space(2, combine_sort_space)
    return space


@pytest.fixture
def mixed_space() -> ParameterSpace:
    """Large enough to take the random search path (unbounded)."""
    return ParameterSpace([
        IntegerParamDescriptor(parameter=HadoopParameter.SORT_MB, effect=TaskEffect.MAP, min_value=20, max_value=750),
        ContinuousParamDescriptor(parameter=HadoopParameter.SPILL_PERC, effect=TaskEffect.MAP, min_value=0.2, max_value=0.9),
    ])


def _quadratic(point) -> float:
    sort_mb = int(point[HadoopParameter.SORT_MB])
    spill = float(point[HadoopParameter.SPILL_PERC])
    return (sort_mb - 300) ** 2 / 1000.0 + (spill - 0.6) ** 2 * 100.0


@pytest.fixture
def quadratic_cost():
    """Smooth cost with its minimum at io.sort.mb=300, io.sort.spill.percent=0.6."""
    return _quadratic
