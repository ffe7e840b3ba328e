# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: errors.py
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

from typing import Any


class JobOptError(Exception):
    """Base class for all job optimizer errors."""


class InvalidDomainError(JobOptError, ValueError):
    """A parameter domain is malformed (e.g. lower bound above upper bound)."""


class InvalidSamplingFractionError(JobOptError, ValueError):
    """A neighborhood scale or sampling fraction falls outside [0, 1]."""


class CostEvaluationError(JobOptError, RuntimeError):
    """
    The cost engine failed for a space point.

    Fatal for the enclosing search: the running minimum and the threshold
    mean cannot be maintained with a missing sample.
    """

    def __init__(self, point: Any, reason: str) -> None:
        super().__init__(f"Cost evaluation failed for {point}: {reason}")
        self.point = point
        self.reason = reason
