# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: cardinality.py
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

from dataclasses import dataclass
from typing import Iterable, Optional

# Integer view of an unbounded (or too large) number of unique points
UNBOUNDED = 2**31 - 1


@dataclass(frozen=True)
class Cardinality:
    """
    Number of distinct values a domain or space can produce.

    Either ``Cardinality.finite(n)`` or ``Cardinality.unbounded()``. Finite
    products are kept exact; only ``to_int`` saturates at ``UNBOUNDED``.
    """
    count: Optional[int] = None

    @classmethod
    def finite(cls, count: int) -> "Cardinality":
        if count < 0:
            raise ValueError(f"Cardinality must be non-negative, got {count}")
        return cls(count=int(count))

    @classmethod
    def unbounded(cls) -> "Cardinality":
        return cls(count=None)

    @classmethod
    def product(cls, cardinalities: Iterable["Cardinality"]) -> "Cardinality":
        total = cls.finite(1)
        for cardinality in cardinalities:
            total = total * cardinality
        return total

    @property
    def is_unbounded(self) -> bool:
        return self.count is None

    def __mul__(self, other: "Cardinality") -> "Cardinality":
        if self.is_unbounded or other.is_unbounded:
            return Cardinality.unbounded()
        return Cardinality.finite(self.count * other.count)

    def to_int(self) -> int:
        if self.is_unbounded or self.count > UNBOUNDED:
            return UNBOUNDED
        return self.count

    def __str__(self) -> str:
        return "unbounded" if self.is_unbounded else str(self.count)
