# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: point.py
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

from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, Iterator, List, Optional

from jobopt.parameters.descriptors import format_value


class ParameterSpacePoint(Mapping):
    """
    Immutable assignment of one formatted value per parameter name.

    Keys are always kept in ascending order, so iteration, equality and the
    string form do not depend on how the point was built.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping] = None):
        items = {} if values is None else values
        converted = {str(name): format_value(value) for name, value in items.items()}
        self._values: Dict[str, str] = dict(sorted(converted.items()))

    def __getitem__(self, name: Any) -> str:
        return self._values[str(name)]

    def __contains__(self, name: Any) -> bool:
        return str(name) in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParameterSpacePoint):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._values.items()))

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value}" for name, value in self._values.items())
        return f"ParameterSpacePoint({body})"

    __str__ = __repr__

    def with_value(self, name: Any, value: Any) -> "ParameterSpacePoint":
        values = dict(self._values)
        values[str(name)] = value
        return ParameterSpacePoint(values)

    def merge(self, other: Mapping) -> "ParameterSpacePoint":
        """New point holding both assignments; values of ``other`` win."""
        values = dict(self._values)
        values.update({str(k): v for k, v in other.items()})
        return ParameterSpacePoint(values)

    def to_configuration(self) -> Dict[str, str]:
        return dict(self._values)

    def populate_configuration(self, conf: MutableMapping) -> MutableMapping:
        conf.update(self._values)
        return conf


class MultiJobParamSpacePoint(Mapping):
    """One ParameterSpacePoint per job id, in job registration order."""

    __slots__ = ("_points",)

    def __init__(self, points: Optional[Mapping] = None):
        items = {} if points is None else points
        self._points: Dict[int, ParameterSpacePoint] = {
            int(job_id): point if isinstance(point, ParameterSpacePoint) else ParameterSpacePoint(point)
            for job_id, point in items.items()
        }

    def __getitem__(self, job_id: int) -> ParameterSpacePoint:
        try:
            key = int(job_id)
        except (TypeError, ValueError) as exc:
            raise KeyError(job_id) from exc
        return self._points[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MultiJobParamSpacePoint):
            return self._points == other._points
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._points.items())))

    def __repr__(self) -> str:
        body = ", ".join(f"{job_id}: {point}" for job_id, point in self._points.items())
        return f"MultiJobParamSpacePoint({body})"

    __str__ = __repr__

    @property
    def job_ids(self) -> List[int]:
        return list(self._points)

    def job_space_point(self, job_id: int) -> ParameterSpacePoint:
        if job_id not in self:
            raise KeyError(f"No space point for job {job_id}")
        return self[job_id]

    def with_job_point(self, job_id: int, point: ParameterSpacePoint) -> "MultiJobParamSpacePoint":
        points = dict(self._points)
        points[int(job_id)] = point
        return MultiJobParamSpacePoint(points)

    def merge(self, other: "MultiJobParamSpacePoint") -> "MultiJobParamSpacePoint":
        """Per-job merge; jobs present only in ``other`` are appended."""
        points = dict(self._points)
        for job_id, point in other.items():
            points[job_id] = points[job_id].merge(point) if job_id in points else point
        return MultiJobParamSpacePoint(points)

    def to_configurations(self) -> Dict[int, Dict[str, str]]:
        return {job_id: point.to_configuration() for job_id, point in self._points.items()}
