# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: config.py
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

import math
from typing import Literal, Optional

import dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

dotenv.load_dotenv()


class RRSSettings(BaseSettings):
    """
    Recursive Random Search settings. None of them depends on the number of
    dimensions of the searched space.
    """
    explore_confidence_prob: float = Field(0.99, gt=0.0, lt=1.0, description="p: exploration confidence")
    explore_percentile: float = Field(0.1, gt=0.0, lt=1.0, description="r: exploration percentile")
    exploit_confidence_prob: float = Field(0.99, gt=0.0, lt=1.0, description="q: exploitation confidence")
    exploit_expected_value: float = Field(0.8, gt=0.0, lt=1.0, description="v: exploitation expected value")
    exploit_reduction_ratio: float = Field(0.5, gt=0.0, lt=1.0, description="c: radius shrink ratio")
    exploit_termination_size: float = Field(0.001, gt=0.0, description="s_t: radius at which exploitation stops")

    seed: Optional[int] = Field(None, description="Per-run random seed; None uses the shared random source")
    max_search_seconds: Optional[float] = Field(None, gt=0.0, description="Deadline checked between iterations")

    model_config = SettingsConfigDict(
        env_prefix="RRS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def exploration_sample_size(self) -> int:
        """n = round(ln(1-p) / ln(1-r))"""
        ratio = math.log(1 - self.explore_confidence_prob) / math.log(1 - self.explore_percentile)
        return max(1, int(math.floor(ratio + 0.5)))

    @property
    def exploitation_patience(self) -> int:
        """l = round(ln(1-q) / ln(1-v))"""
        ratio = math.log(1 - self.exploit_confidence_prob) / math.log(1 - self.exploit_expected_value)
        return max(1, int(math.floor(ratio + 0.5)))


class FullEnumSettings(BaseSettings):
    """Grid enumeration settings."""
    use_random_values: bool = False
    num_values_per_param: int = Field(2, ge=1)
    seed: Optional[int] = None

    model_config = SettingsConfigDict(
        env_prefix="FULLENUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class JobOptimizerSettings(BaseSettings):
    optimizer_type: Literal["full", "smart_full", "rrs", "smart_rrs"] = "smart_rrs"

    model_config = SettingsConfigDict(
        env_prefix="JOBOPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
