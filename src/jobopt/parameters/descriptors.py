# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: descriptors.py
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

"""
Parameter descriptors: one tunable dimension, its domain, and how to draw
values from it.

The variants form a closed union discriminated by ``kind``:

  - ``BooleanParamDescriptor``     {false, true}
  - ``IntegerParamDescriptor``     [min_value, max_value], inclusive
  - ``ContinuousParamDescriptor``  [min_value, max_value], real valued
  - ``ListParamDescriptor``        ordered enumeration of string values

All values handed out by a descriptor are already formatted as configuration
strings ("true", "42", "0.35", ...), which is what space points store.
"""

import math
from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobopt.errors import InvalidDomainError, InvalidSamplingFractionError
from jobopt.parameters.cardinality import Cardinality
from jobopt.parameters.hadoop_parameters import TaskEffect
from jobopt.parameters.random_source import resolve_rng

# Integer domains are drawn as int64, with an exclusive upper bound
INT64_BOUNDS = np.iinfo(np.int64)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_value(value: Any) -> str:
    """Render a typed value the way configurations store it."""
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        return str(float(value))
    return str(value)


def check_scale(scale: float) -> float:
    if not 0.0 <= scale <= 1.0:
        raise InvalidSamplingFractionError(f"Scale must be within [0, 1], got {scale}")
    return float(scale)


def check_count(count: int) -> int:
    if count < 1:
        raise ValueError(f"Number of values per parameter must be at least 1, got {count}")
    return int(count)


class BaseParamDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    parameter: str = Field(..., description="Configuration key, unique within a space")
    effect: TaskEffect = Field(TaskEffect.NONE, description="Tasks affected by the parameter")

    @field_validator("parameter", mode="before")
    @classmethod
    def _parameter_key(cls, value: Any) -> Any:
        return value.value if isinstance(value, Enum) else value

    # ---------------- Contract ----------------

    def num_unique_values(self) -> Cardinality:
        raise NotImplementedError

    def random_value(self, rng: Optional[np.random.Generator] = None) -> str:
        raise NotImplementedError

    def random_value_near(
            self,
            center: str,
            scale: float,
            rng: Optional[np.random.Generator] = None
    ) -> str:
        raise NotImplementedError

    def equi_spaced_values(self, count: int) -> List[str]:
        raise NotImplementedError

    def random_values(self, count: int, rng: Optional[np.random.Generator] = None) -> List[str]:
        raise NotImplementedError

    def parse_value(self, value: str) -> Any:
        raise NotImplementedError

    # ---------------- Shared ----------------

    def grid_values(
            self,
            count: int,
            random: bool = False,
            rng: Optional[np.random.Generator] = None
    ) -> List[str]:
        """
        Representative values used to build a grid: equi-spaced over the
        domain, or ``count`` random draws when ``random`` is set.
        """
        check_count(count)
        if random:
            return self.random_values(count, rng)
        return self.equi_spaced_values(count)

    def is_unbounded(self) -> bool:
        return self.num_unique_values().is_unbounded


class BooleanParamDescriptor(BaseParamDescriptor):
    kind: Literal["boolean"] = "boolean"

    def num_unique_values(self) -> Cardinality:
        return Cardinality.finite(2)

    def random_value(self, rng: Optional[np.random.Generator] = None) -> str:
        return format_value(bool(resolve_rng(rng).integers(2)))

    def random_value_near(
            self,
            center: str,
            scale: float,
            rng: Optional[np.random.Generator] = None
    ) -> str:
        # No notion of distance on {false, true}
        check_scale(scale)
        return self.random_value(rng)

    def equi_spaced_values(self, count: int) -> List[str]:
        check_count(count)
        return ["false", "true"]

    def random_values(self, count: int, rng: Optional[np.random.Generator] = None) -> List[str]:
        check_count(count)
        return ["false", "true"]

    def parse_value(self, value: str) -> bool:
        text = str(value).strip().lower()
        if text not in ("true", "false"):
            raise InvalidDomainError(f"'{value}' is not a boolean value for {self.parameter}")
        return text == "true"


class IntegerParamDescriptor(BaseParamDescriptor):
    kind: Literal["integer"] = "integer"
    min_value: int
    max_value: int

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        if self.min_value > self.max_value:
            raise InvalidDomainError(
                f"Invalid domain for {self.parameter}: {self.min_value} > {self.max_value}"
            )
        if (
                self.min_value < INT64_BOUNDS.min
                or self.max_value >= INT64_BOUNDS.max
                or self.max_value - self.min_value >= INT64_BOUNDS.max
        ):
            raise InvalidDomainError(
                f"Domain of {self.parameter} does not fit in 64-bit integers: "
                f"[{self.min_value}, {self.max_value}]"
            )

    def num_unique_values(self) -> Cardinality:
        return Cardinality.finite(self.max_value - self.min_value + 1)

    def random_value(self, rng: Optional[np.random.Generator] = None) -> str:
        return format_value(resolve_rng(rng).integers(self.min_value, self.max_value + 1))

    def random_value_near(
            self,
            center: str,
            scale: float,
            rng: Optional[np.random.Generator] = None
    ) -> str:
        scale = check_scale(scale)
        middle = min(max(self.parse_value(center), self.min_value), self.max_value)
        radius = round_half_up(scale * (self.max_value - self.min_value))
        low = max(self.min_value, middle - radius)
        high = min(self.max_value, middle + radius)
        return format_value(resolve_rng(rng).integers(low, high + 1))

    def equi_spaced_values(self, count: int) -> List[str]:
        count = min(check_count(count), self.num_unique_values().to_int())
        if count == 1:
            return [format_value(self.min_value)]

        width = self.max_value - self.min_value
        return [
            format_value(self.min_value + round_half_up(i * width / (count - 1)))
            for i in range(count)
        ]

    def random_values(self, count: int, rng: Optional[np.random.Generator] = None) -> List[str]:
        size = self.max_value - self.min_value + 1
        if check_count(count) >= size:
            return self.equi_spaced_values(count)

        offsets = resolve_rng(rng).choice(size, size=count, replace=False)
        return [format_value(self.min_value + int(o)) for o in offsets]

    def parse_value(self, value: str) -> int:
        try:
            return int(str(value).strip())
        except ValueError as exc:
            raise InvalidDomainError(f"'{value}' is not an integer value for {self.parameter}") from exc


class ContinuousParamDescriptor(BaseParamDescriptor):
    kind: Literal["continuous"] = "continuous"
    min_value: float
    max_value: float

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        if self.min_value > self.max_value:
            raise InvalidDomainError(
                f"Invalid domain for {self.parameter}: {self.min_value} > {self.max_value}"
            )

    def num_unique_values(self) -> Cardinality:
        return Cardinality.unbounded()

    def random_value(self, rng: Optional[np.random.Generator] = None) -> str:
        return format_value(resolve_rng(rng).uniform(self.min_value, self.max_value))

    def random_value_near(
            self,
            center: str,
            scale: float,
            rng: Optional[np.random.Generator] = None
    ) -> str:
        scale = check_scale(scale)
        middle = min(max(self.parse_value(center), self.min_value), self.max_value)
        radius = scale * (self.max_value - self.min_value)
        low = max(self.min_value, middle - radius)
        high = min(self.max_value, middle + radius)
        return format_value(resolve_rng(rng).uniform(low, high))

    def equi_spaced_values(self, count: int) -> List[str]:
        count = check_count(count)
        if self.min_value == self.max_value:
            return [format_value(self.min_value)]
        return [format_value(v) for v in np.linspace(self.min_value, self.max_value, count)]

    def random_values(self, count: int, rng: Optional[np.random.Generator] = None) -> List[str]:
        count = check_count(count)
        if self.min_value == self.max_value:
            return [format_value(self.min_value)]
        draws = resolve_rng(rng).uniform(self.min_value, self.max_value, size=count)
        return [format_value(v) for v in draws]

    def parse_value(self, value: str) -> float:
        try:
            return float(str(value).strip())
        except ValueError as exc:
            raise InvalidDomainError(f"'{value}' is not a real value for {self.parameter}") from exc


class ListParamDescriptor(BaseParamDescriptor):
    kind: Literal["list"] = "list"
    values: Tuple[str, ...]

    @field_validator("values", mode="before")
    @classmethod
    def _format_values(cls, values: Any) -> Any:
        return tuple(format_value(v) for v in values)

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        if not self.values:
            raise InvalidDomainError(f"Empty list of values for {self.parameter}")
        if len(set(self.values)) != len(self.values):
            raise InvalidDomainError(f"Duplicate values for {self.parameter}: {self.values}")

    def num_unique_values(self) -> Cardinality:
        return Cardinality.finite(len(self.values))

    def random_value(self, rng: Optional[np.random.Generator] = None) -> str:
        return self.values[int(resolve_rng(rng).integers(len(self.values)))]

    def random_value_near(
            self,
            center: str,
            scale: float,
            rng: Optional[np.random.Generator] = None
    ) -> str:
        scale = check_scale(scale)
        index = self.values.index(self.parse_value(center))
        radius = round_half_up(scale * (len(self.values) - 1))
        low = max(0, index - radius)
        high = min(len(self.values) - 1, index + radius)
        return self.values[int(resolve_rng(rng).integers(low, high + 1))]

    def equi_spaced_values(self, count: int) -> List[str]:
        count = min(check_count(count), len(self.values))
        if count == 1:
            return [self.values[0]]

        last = len(self.values) - 1
        return [self.values[round_half_up(i * last / (count - 1))] for i in range(count)]

    def random_values(self, count: int, rng: Optional[np.random.Generator] = None) -> List[str]:
        if check_count(count) >= len(self.values):
            return list(self.values)

        indexes = resolve_rng(rng).choice(len(self.values), size=count, replace=False)
        return [self.values[int(i)] for i in indexes]

    def parse_value(self, value: str) -> str:
        text = format_value(value)
        if text not in self.values:
            raise InvalidDomainError(f"'{value}' is not one of {list(self.values)} for {self.parameter}")
        return text


ParameterDescriptor = Annotated[
    Union[
        BooleanParamDescriptor,
        IntegerParamDescriptor,
        ContinuousParamDescriptor,
        ListParamDescriptor,
    ],
    Field(discriminator="kind"),
]
