# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: random_source.py
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
Process-wide random source shared by every descriptor.

Reseeding affects every later draw in the process. Concurrent searches must
either serialize or pass their own ``np.random.Generator`` to the sampling
calls (see ``RRSSettings.seed``).
"""

from typing import Optional
import numpy as np

_shared_rng: np.random.Generator = np.random.default_rng()


def get_random_source() -> np.random.Generator:
    return _shared_rng


def set_random_seed(seed: int) -> None:
    """Reseed the shared generator so later draws are reproducible."""
    global _shared_rng
    _shared_rng = np.random.default_rng(seed)


def reset_random_source() -> None:
    """Drop any seed and go back to an entropy-seeded generator."""
    global _shared_rng
    _shared_rng = np.random.default_rng()


def resolve_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return _shared_rng if rng is None else rng
