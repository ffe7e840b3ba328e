# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: hadoop_parameters.py
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

from enum import Enum
from typing import List


class ParameterEnum(str, Enum):
    @classmethod
    def to_list(cls) -> List[str]:
        return [e.value for e in cls]

    def __str__(self) -> str:
        return self.value


class TaskEffect(ParameterEnum):
    """
    Which tasks a parameter affects. Informational only: the search treats
    every dimension the same way.
    """
    NONE = "none"       # neither map nor reduce tasks (may affect the job)
    MAP = "map"
    REDUCE = "reduce"
    BOTH = "both"


class HadoopParameter(ParameterEnum):
    """
    Subset of the Hadoop configuration parameters the job optimizer can tune.
    Each value is the configuration key.
    """
    SORT_MB = "io.sort.mb"
    SPILL_PERC = "io.sort.spill.percent"
    SORT_REC_PERC = "io.sort.record.percent"
    SORT_FACTOR = "io.sort.factor"
    NUM_SPILLS_COMBINE = "min.num.spills.for.combine"

    RED_TASKS = "mapred.reduce.tasks"
    INMEM_MERGE = "mapred.inmem.merge.threshold"
    SHUFFLE_IN_BUFF_PERC = "mapred.job.shuffle.input.buffer.percent"
    SHUFFLE_MERGE_PERC = "mapred.job.shuffle.merge.percent"
    RED_IN_BUFF_PERC = "mapred.job.reduce.input.buffer.percent"
    RED_SLOWSTART_MAPS = "mapred.reduce.slowstart.completed.maps"

    COMBINE = "starfish.use.combiner"
    COMPRESS_MAP_OUT = "mapred.compress.map.output"
    COMPRESS_OUT = "mapred.output.compress"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    HadoopParameter.SORT_MB:
        "Size (MB) of map-side buffer for storing and sorting key-value pairs produced by the map function",
    HadoopParameter.SPILL_PERC:
        "Usage threshold of map-side memory buffer to trigger a sort and spill of the stored key-value pairs",
    HadoopParameter.SORT_REC_PERC:
        "Fraction of io.sort.mb for storing metadata for every key-value pair stored in the map-side buffer",
    HadoopParameter.SORT_FACTOR:
        "Number of sorted streams to merge at once during multiphase external sorting",
    HadoopParameter.NUM_SPILLS_COMBINE:
        "Minimum number of spill files to trigger the use of Combiner during the merging of map output data",
    HadoopParameter.RED_TASKS:
        "Number of reduce tasks",
    HadoopParameter.INMEM_MERGE:
        "Threshold on the number of copied map outputs to trigger reduce-side merging during the shuffle",
    HadoopParameter.SHUFFLE_IN_BUFF_PERC:
        "Percent of reduce task's heap memory used to buffer output data copied from map tasks during the shuffle",
    HadoopParameter.SHUFFLE_MERGE_PERC:
        "Usage threshold of reduce-side memory buffer to trigger reduce-side merging during the shuffle",
    HadoopParameter.RED_IN_BUFF_PERC:
        "Percent of reduce task's heap memory used to buffer map output data while applying the reduce function",
    HadoopParameter.RED_SLOWSTART_MAPS:
        "Proportion of map tasks that need to be completed before any reduce tasks are scheduled",
    HadoopParameter.COMBINE:
        "Flag to use Combiner function to preaggregate map outputs before transfer to reduce tasks",
    HadoopParameter.COMPRESS_MAP_OUT:
        "Boolean flag to turn on the compression of map output data",
    HadoopParameter.COMPRESS_OUT:
        "Boolean flag to turn on the compression of the job's output",
}
