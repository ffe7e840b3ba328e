# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: test_descriptors.py
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

import numpy as np
import pytest
from pydantic import TypeAdapter, ValidationError

from jobopt.errors import InvalidDomainError, InvalidSamplingFractionError
from jobopt.parameters import (
    BooleanParamDescriptor,
    ContinuousParamDescriptor,
    HadoopParameter,
    IntegerParamDescriptor,
    ListParamDescriptor,
    ParameterDescriptor,
    TaskEffect,
    UNBOUNDED,
    get_random_source,
    set_random_seed,
)


def test_boolean_grid_is_always_both_values():
    descriptor = BooleanParamDescriptor(parameter=HadoopParameter.COMBINE)

    assert descriptor.num_unique_values().to_int() == 2
    for count in (1, 2, 16):
        assert descriptor.grid_values(count) == ["false", "true"]
        assert descriptor.grid_values(count, random=True) == ["false", "true"]


def test_boolean_near_ignores_scale():
    descriptor = BooleanParamDescriptor(parameter="flag")
    rng = np.random.default_rng(0)

    drawn = {descriptor.random_value_near("true", 0.0, rng) for _ in range(100)}
    assert drawn == {"false", "true"}


def test_parameter_accepts_catalog_members():
    descriptor = IntegerParamDescriptor(parameter=HadoopParameter.SORT_MB, effect=TaskEffect.MAP, min_value=20, max_value=150)

    assert descriptor.parameter == "io.sort.mb"
    assert descriptor.effect == TaskEffect.MAP


def test_integer_cardinality_and_equi_spaced_values():
    descriptor = IntegerParamDescriptor(parameter="x", min_value=2, max_value=5)

    assert descriptor.num_unique_values().to_int() == 4
    assert descriptor.equi_spaced_values(16) == ["2", "3", "4", "5"]
    assert descriptor.equi_spaced_values(2) == ["2", "5"]
    assert descriptor.equi_spaced_values(1) == ["2"]
    assert IntegerParamDescriptor(parameter="y", min_value=0, max_value=10).equi_spaced_values(3) == ["0", "5", "10"]


def test_integer_random_values_are_distinct_and_in_domain():
    descriptor = IntegerParamDescriptor(parameter="x", min_value=0, max_value=99)
    rng = np.random.default_rng(1)

    values = descriptor.random_values(10, rng)
    assert len(values) == len(set(values)) == 10
    assert all(0 <= int(v) <= 99 for v in values)

    small = IntegerParamDescriptor(parameter="y", min_value=1, max_value=3)
    assert small.random_values(8, rng) == ["1", "2", "3"]


def test_integer_near_stays_within_radius():
    descriptor = IntegerParamDescriptor(parameter="x", min_value=0, max_value=100)
    rng = np.random.default_rng(2)

    draws = [int(descriptor.random_value_near("50", 0.1, rng)) for _ in range(300)]
    assert min(draws) >= 40
    assert max(draws) <= 60

    clipped = [int(descriptor.random_value_near("98", 0.1, rng)) for _ in range(300)]
    assert max(clipped) <= 100
    assert min(clipped) >= 88


def test_integer_invalid_domain():
    with pytest.raises(InvalidDomainError):
        IntegerParamDescriptor(parameter="x", min_value=5, max_value=2)


def test_integer_domain_must_fit_in_64_bits():
    with pytest.raises(InvalidDomainError):
        IntegerParamDescriptor(parameter="x", min_value=0, max_value=2**70)
    with pytest.raises(InvalidDomainError):
        IntegerParamDescriptor(parameter="x", min_value=-(2**70), max_value=0)
    with pytest.raises(InvalidDomainError):
        IntegerParamDescriptor(parameter="x", min_value=-(2**62), max_value=2**62)

    widest = IntegerParamDescriptor(parameter="x", min_value=0, max_value=2**62)
    assert 0 <= widest.parse_value(widest.random_value()) <= 2**62
    assert widest.num_unique_values().to_int() == UNBOUNDED


def test_scale_outside_unit_interval():
    descriptor = IntegerParamDescriptor(parameter="x", min_value=0, max_value=10)

    with pytest.raises(InvalidSamplingFractionError):
        descriptor.random_value_near("5", 1.5)
    with pytest.raises(InvalidSamplingFractionError):
        descriptor.random_value_near("5", -0.1)


def test_count_must_be_positive():
    descriptor = ContinuousParamDescriptor(parameter="x", min_value=0.0, max_value=1.0)

    with pytest.raises(ValueError):
        descriptor.grid_values(0)


def test_continuous_is_unbounded_with_exact_counts():
    descriptor = ContinuousParamDescriptor(parameter="x", min_value=0.0, max_value=1.0)
    rng = np.random.default_rng(3)

    assert descriptor.num_unique_values().is_unbounded
    assert descriptor.is_unbounded()
    assert descriptor.equi_spaced_values(5) == ["0.0", "0.25", "0.5", "0.75", "1.0"]
    assert descriptor.equi_spaced_values(1) == ["0.0"]

    values = descriptor.random_values(16, rng)
    assert len(values) == 16
    assert all(0.0 <= float(v) <= 1.0 for v in values)


def test_continuous_degenerate_domain():
    descriptor = ContinuousParamDescriptor(parameter="x", min_value=0.5, max_value=0.5)

    assert descriptor.equi_spaced_values(8) == ["0.5"]
    assert descriptor.random_value() == "0.5"


def test_continuous_near_is_clipped():
    descriptor = ContinuousParamDescriptor(parameter="x", min_value=0.0, max_value=1.0)
    rng = np.random.default_rng(4)

    draws = [float(descriptor.random_value_near("0.95", 0.1, rng)) for _ in range(300)]
    assert min(draws) >= 0.85
    assert max(draws) <= 1.0


def test_list_descriptor():
    descriptor = ListParamDescriptor(parameter="x", values=("a", "b", "c", "d", "e"))
    rng = np.random.default_rng(5)

    assert descriptor.num_unique_values().to_int() == 5
    assert descriptor.equi_spaced_values(3) == ["a", "c", "e"]
    assert descriptor.equi_spaced_values(1) == ["a"]
    assert descriptor.random_values(9, rng) == ["a", "b", "c", "d", "e"]

    near = {descriptor.random_value_near("c", 0.25, rng) for _ in range(200)}
    assert near == {"b", "c", "d"}


def test_list_descriptor_formats_values():
    descriptor = ListParamDescriptor(parameter=HadoopParameter.NUM_SPILLS_COMBINE, values=[3, 9999])

    assert descriptor.values == ("3", "9999")
    assert descriptor.parse_value("9999") == "9999"


def test_list_descriptor_invalid_domains():
    with pytest.raises(InvalidDomainError):
        ListParamDescriptor(parameter="x", values=())
    with pytest.raises(InvalidDomainError):
        ListParamDescriptor(parameter="x", values=("a", "a"))
    with pytest.raises(InvalidDomainError):
        ListParamDescriptor(parameter="x", values=("a", "b")).random_value_near("z", 0.5)


def test_parse_value():
    assert BooleanParamDescriptor(parameter="b").parse_value("TRUE") is True
    assert IntegerParamDescriptor(parameter="i", min_value=0, max_value=9).parse_value("7") == 7
    assert ContinuousParamDescriptor(parameter="c", min_value=0, max_value=1).parse_value("0.25") == 0.25

    with pytest.raises(InvalidDomainError):
        BooleanParamDescriptor(parameter="b").parse_value("yes")
    with pytest.raises(InvalidDomainError):
        IntegerParamDescriptor(parameter="i", min_value=0, max_value=9).parse_value("seven")


def test_descriptors_are_immutable():
    descriptor = IntegerParamDescriptor(parameter="x", min_value=0, max_value=9)

    with pytest.raises(ValidationError):
        descriptor.max_value = 20


def test_descriptor_union_dispatches_on_kind():
    adapter = TypeAdapter(ParameterDescriptor)

    descriptor = adapter.validate_python({"kind": "integer", "parameter": "x", "min_value": 1, "max_value": 3})
    assert isinstance(descriptor, IntegerParamDescriptor)

    descriptor = adapter.validate_python({"kind": "list", "parameter": "y", "values": ["3", "9999"]})
    assert isinstance(descriptor, ListParamDescriptor)


def test_shared_random_source_can_be_seeded():
    descriptor = ContinuousParamDescriptor(parameter="x", min_value=0.0, max_value=1.0)

    set_random_seed(123)
    generator = get_random_source()
    first = [descriptor.random_value() for _ in range(5)]
    set_random_seed(123)
    second = [descriptor.random_value() for _ in range(5)]

    assert first == second
    assert get_random_source() is not generator
