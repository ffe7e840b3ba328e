# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: job_optimizer.py
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

from typing import Callable, Dict, Mapping, Optional, Union

from loguru import logger

from jobopt.config import FullEnumSettings, JobOptimizerSettings, RRSSettings
from jobopt.metaheuristics.full_enumeration import FullEnumeration
from jobopt.metaheuristics.recursive_random_search import RecursiveRandomSearch
from jobopt.space.point import ParameterSpacePoint
from jobopt.space.space_utils import (
    get_full_param_space,
    get_param_space_for_mappers,
    get_param_space_for_reducers,
)

CostModel = Callable[[Dict[str, str]], float]

SUPPORTED_OPTIMIZERS = ("full", "smart_full", "rrs", "smart_rrs")


class ConfigurationCostEngine:
    """
    Cost of a space point as predicted by ``cost_model`` for the base job
    configuration with the point's values written over it.
    """

    def __init__(self, cost_model: CostModel, base_conf: Mapping[str, str]):
        self.cost_model = cost_model
        self.base_conf: Dict[str, str] = dict(base_conf)

    def cost(self, point: ParameterSpacePoint) -> float:
        conf = point.populate_configuration(dict(self.base_conf))
        return self.cost_model(conf)


class JobOptimizer:
    """
    Recommends a configuration for one MapReduce job.

      - full:       grid enumeration over the full parameter space
      - smart_full: grid enumeration over the map-side space, then over the
                    reduce-side space with the best map-side values fixed
      - rrs:        Recursive Random Search over the full parameter space
      - smart_rrs:  RRS over the map-side space, then RRS over the
                    reduce-side space with the best map-side values fixed
    """

    def __init__(
            self,
            cost_model: CostModel,
            settings: Optional[JobOptimizerSettings] = None,
            rrs_settings: Optional[RRSSettings] = None,
            full_enum_settings: Optional[FullEnumSettings] = None,
            optimizer_type: Optional[str] = None
    ):
        self.settings = settings or JobOptimizerSettings()
        self.optimizer_type: str = optimizer_type or self.settings.optimizer_type
        if self.optimizer_type not in SUPPORTED_OPTIMIZERS:
            logger.warning(f"[JobOptimizer] Unsupported optimizer type: {self.optimizer_type}")
            raise ValueError(
                f"Unsupported optimizer type '{self.optimizer_type}', expected one of {SUPPORTED_OPTIMIZERS}"
            )

        self.cost_model = cost_model
        self.rrs_settings = rrs_settings or RRSSettings()
        self.full_enum_settings = full_enum_settings or FullEnumSettings()

        self.best_point: Optional[ParameterSpacePoint] = None
        self.best_cost: Optional[float] = None

    def find_best_configuration(self, job_conf: Mapping[str, str], full_conf: bool = True) -> Dict[str, str]:
        """
        :param job_conf: current job configuration (string keys and values)
        :param full_conf: return a full copy of ``job_conf`` with the tuned
                          values, or only the tuned keys
        :return: the recommended configuration
        """
        if self.optimizer_type == "full":
            self._optimize_full(job_conf)
        elif self.optimizer_type == "rrs":
            self._optimize_rrs(job_conf)
        elif self.optimizer_type == "smart_full":
            self._optimize_smart_full(job_conf)
        else:
            self._optimize_smart_rrs(job_conf)

        logger.info(f"[JobOptimizer] {self.optimizer_type}: best cost {self.best_cost}, {self.best_point}")

        recommended = dict(job_conf) if full_conf else {}
        return self.best_point.populate_configuration(recommended)

    def _optimize_full(self, job_conf: Mapping[str, str]) -> None:
        search = FullEnumeration(self.full_enum_settings)
        self.best_point = search.find_best(
            get_full_param_space(job_conf), ConfigurationCostEngine(self.cost_model, job_conf))
        self.best_cost = search.last_run.best_cost

    def _optimize_rrs(self, job_conf: Mapping[str, str]) -> None:
        search = RecursiveRandomSearch(self.rrs_settings)
        self.best_point = search.find_best(
            get_full_param_space(job_conf), ConfigurationCostEngine(self.cost_model, job_conf))
        self.best_cost = search.last_run.best_cost

    def _optimize_smart_rrs(self, job_conf: Mapping[str, str]) -> None:
        self._optimize_in_two_steps(job_conf, lambda: RecursiveRandomSearch(self.rrs_settings))

    def _optimize_smart_full(self, job_conf: Mapping[str, str]) -> None:
        self._optimize_in_two_steps(job_conf, lambda: FullEnumeration(self.full_enum_settings))

    def _optimize_in_two_steps(
            self,
            job_conf: Mapping[str, str],
            new_search: Callable[[], Union[RecursiveRandomSearch, FullEnumeration]]
    ) -> None:
        map_search = new_search()
        map_point = map_search.find_best(
            get_param_space_for_mappers(job_conf), ConfigurationCostEngine(self.cost_model, job_conf))

        # Reduce side is tuned on top of the best map side values
        tuned_conf = map_point.populate_configuration(dict(job_conf))
        reduce_search = new_search()
        reduce_point = reduce_search.find_best(
            get_param_space_for_reducers(job_conf), ConfigurationCostEngine(self.cost_model, tuned_conf))

        self.best_point = map_point.merge(reduce_point)
        if reduce_search.last_run.best_cost is not None:
            self.best_cost = reduce_search.last_run.best_cost
        else:
            self.best_cost = map_search.last_run.best_cost
