# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: test_cardinality.py
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

from jobopt.errors import CostEvaluationError, InvalidDomainError, JobOptError
from jobopt.parameters import UNBOUNDED, Cardinality
from jobopt.space import ParameterSpacePoint


def test_finite_products_are_exact():
    assert Cardinality.finite(2) * Cardinality.finite(4) == Cardinality.finite(8)
    assert Cardinality.product([]) == Cardinality.finite(1)
    assert Cardinality.finite(2 ** 40).to_int() == UNBOUNDED
    assert Cardinality.finite(2 ** 40).count == 2 ** 40


def test_unbounded_absorbs_products():
    product = Cardinality.product([Cardinality.finite(3), Cardinality.unbounded(), Cardinality.finite(0)])

    assert product.is_unbounded
    assert product.to_int() == UNBOUNDED
    assert str(product) == "unbounded"


def test_negative_cardinality():
    with pytest.raises(ValueError):
        Cardinality.finite(-1)


def test_error_hierarchy():
    point = ParameterSpacePoint({"io.sort.mb": "100"})
    error = CostEvaluationError(point, "timeout")

    assert isinstance(error, JobOptError)
    assert isinstance(error, RuntimeError)
    assert error.point == point
    assert "io.sort.mb=100" in str(error)
    assert issubclass(InvalidDomainError, ValueError)
