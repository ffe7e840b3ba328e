# -----------------------------------------------------------------------------
#  Project: Job Self-Tuning Framework (RRS)
#  File: space_utils.py
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
Builders for the parameter spaces of a MapReduce job, driven by its plain
key/value configuration.

Map-only jobs (``mapred.reduce.tasks == 0``) can only tune the output
compression. Combiner related parameters are added only when the job sets a
combiner class. Parameters listed (comma separated) under
``EXCLUDE_PARAMS`` never enter a space.
"""

import re
from typing import Dict, Iterable, Mapping, Set

from loguru import logger

from jobopt.parameters.descriptors import (
    BooleanParamDescriptor,
    ContinuousParamDescriptor,
    IntegerParamDescriptor,
    ListParamDescriptor,
)
from jobopt.parameters.hadoop_parameters import HadoopParameter, TaskEffect
from jobopt.space.parameter_space import ParameterSpace

EXCLUDE_PARAMS = "jobopt.optimizer.exclude.parameters"
MR_RED_TASKS = "mapred.reduce.tasks"
MR_COMBINE_CLASS = "mapreduce.combine.class"
MR_JAVA_OPTS = "mapred.child.java.opts"

MIN_SORT_MB = 20 << 20          # bytes
MAX_MEM_RATIO = 0.75
DEF_TASK_MEM = 200 << 20        # bytes

_JVM_MEM = re.compile(r"-Xmx([0-9]+)([MmGg])")

MAP_SIDE_PARAMS = (
    HadoopParameter.SORT_MB,
    HadoopParameter.SPILL_PERC,
    HadoopParameter.SORT_REC_PERC,
    HadoopParameter.NUM_SPILLS_COMBINE,
)

REDUCE_SIDE_PARAMS = (
    HadoopParameter.RED_TASKS,
    HadoopParameter.INMEM_MERGE,
    HadoopParameter.SHUFFLE_IN_BUFF_PERC,
    HadoopParameter.SHUFFLE_MERGE_PERC,
    HadoopParameter.RED_IN_BUFF_PERC,
    HadoopParameter.RED_SLOWSTART_MAPS,
    HadoopParameter.COMPRESS_OUT,
)


# ---------------- Configuration helpers ----------------

def get_task_memory(conf: Mapping[str, str]) -> int:
    """Task heap in bytes, taken from -Xmx in the child java opts."""
    java_opts = conf.get(MR_JAVA_OPTS)
    if not java_opts:
        return DEF_TASK_MEM

    match = _JVM_MEM.search(java_opts)
    if match is None:
        return DEF_TASK_MEM

    amount, unit = int(match.group(1)), match.group(2).lower()
    return amount << 20 if unit == "m" else amount << 30


def is_map_only(conf: Mapping[str, str]) -> bool:
    return int(conf.get(MR_RED_TASKS, "1")) == 0


def has_combiner(conf: Mapping[str, str]) -> bool:
    return conf.get(MR_COMBINE_CLASS) is not None


def excluded_parameters(conf: Mapping[str, str]) -> Set[str]:
    exclude = conf.get(EXCLUDE_PARAMS) or ""
    return {p.strip() for p in exclude.split(",") if p.strip()}


def add_excluded_parameter(conf: Mapping[str, str], param: str) -> Dict[str, str]:
    """Copy of ``conf`` with ``param`` appended to the exclusion list."""
    return _add_excluded(conf, [str(param)])


def exclude_map_side_params(conf: Mapping[str, str]) -> Dict[str, str]:
    return _add_excluded(conf, [p.value for p in MAP_SIDE_PARAMS])


def exclude_reduce_side_params(conf: Mapping[str, str]) -> Dict[str, str]:
    return _add_excluded(conf, [p.value for p in REDUCE_SIDE_PARAMS])


def _add_excluded(conf: Mapping[str, str], params: Iterable[str]) -> Dict[str, str]:
    updated = dict(conf)
    current = [p.strip() for p in (updated.get(EXCLUDE_PARAMS) or "").split(",") if p.strip()]
    for param in params:
        if param not in current:
            current.append(param)
    updated[EXCLUDE_PARAMS] = ",".join(current)
    return updated


# ---------------- Space builders ----------------

def get_full_param_space(conf: Mapping[str, str]) -> ParameterSpace:
    exclude = excluded_parameters(conf)
    if is_map_only(conf):
        return _map_only_param_space(exclude)

    space = ParameterSpace()
    _add_effect_map_parameters(space, conf, exclude)
    _add_effect_reduce_parameters(space, exclude)
    _add_effect_both_parameters(space, conf, exclude)

    logger.debug(f"[Space] Full space with {space.num_dimensions()} dimensions, excluded={sorted(exclude)}")
    return space


def get_param_space_for_mappers(conf: Mapping[str, str]) -> ParameterSpace:
    exclude = excluded_parameters(conf)
    if is_map_only(conf):
        return _map_only_param_space(exclude)

    space = ParameterSpace()
    _add_effect_map_parameters(space, conf, exclude)
    _add_effect_both_parameters(space, conf, exclude)
    return space


def get_param_space_for_reducers(conf: Mapping[str, str]) -> ParameterSpace:
    space = ParameterSpace()
    if is_map_only(conf):
        return space

    exclude = excluded_parameters(conf)
    _add_effect_reduce_parameters(space, exclude)
    _add_effect_both_parameters(space, conf, exclude)
    return space


def get_param_space_for_next_job(conf: Mapping[str, str]) -> ParameterSpace:
    """
    Parameters of a job that can be tuned while its predecessor in a workflow
    is still being optimized: the number of reducers and map output
    compression.
    """
    exclude = excluded_parameters(conf)
    space = ParameterSpace()

    if not is_map_only(conf) and HadoopParameter.RED_TASKS.value not in exclude:
        space.add_parameter_descriptor(IntegerParamDescriptor(
            parameter=HadoopParameter.RED_TASKS, effect=TaskEffect.REDUCE, min_value=1, max_value=100))

    if HadoopParameter.COMPRESS_MAP_OUT.value not in exclude:
        space.add_parameter_descriptor(BooleanParamDescriptor(
            parameter=HadoopParameter.COMPRESS_MAP_OUT, effect=TaskEffect.BOTH))

    return space


def _map_only_param_space(exclude: Set[str]) -> ParameterSpace:
    space = ParameterSpace()
    if HadoopParameter.COMPRESS_OUT.value not in exclude:
        space.add_parameter_descriptor(BooleanParamDescriptor(
            parameter=HadoopParameter.COMPRESS_OUT, effect=TaskEffect.MAP))
    return space


def _add_effect_map_parameters(space: ParameterSpace, conf: Mapping[str, str], exclude: Set[str]) -> None:
    max_mem = max(int(MAX_MEM_RATIO * get_task_memory(conf)), MIN_SORT_MB)

    candidates = [
        IntegerParamDescriptor(
            parameter=HadoopParameter.SORT_MB, effect=TaskEffect.MAP,
            min_value=MIN_SORT_MB >> 20, max_value=max_mem >> 20),
        ContinuousParamDescriptor(
            parameter=HadoopParameter.SPILL_PERC, effect=TaskEffect.MAP, min_value=0.2, max_value=0.9),
        ContinuousParamDescriptor(
            parameter=HadoopParameter.SORT_REC_PERC, effect=TaskEffect.MAP, min_value=0.01, max_value=0.5),
    ]
    if has_combiner(conf):
        candidates.append(ListParamDescriptor(
            parameter=HadoopParameter.NUM_SPILLS_COMBINE, effect=TaskEffect.MAP, values=("3", "9999")))

    _add_unless_excluded(space, candidates, exclude)


def _add_effect_reduce_parameters(space: ParameterSpace, exclude: Set[str]) -> None:
    _add_unless_excluded(space, [
        IntegerParamDescriptor(
            parameter=HadoopParameter.RED_TASKS, effect=TaskEffect.REDUCE, min_value=1, max_value=100),
        IntegerParamDescriptor(
            parameter=HadoopParameter.INMEM_MERGE, effect=TaskEffect.REDUCE, min_value=10, max_value=1000),
        ContinuousParamDescriptor(
            parameter=HadoopParameter.SHUFFLE_IN_BUFF_PERC, effect=TaskEffect.REDUCE, min_value=0.2, max_value=0.9),
        ContinuousParamDescriptor(
            parameter=HadoopParameter.SHUFFLE_MERGE_PERC, effect=TaskEffect.REDUCE, min_value=0.2, max_value=0.9),
        ContinuousParamDescriptor(
            parameter=HadoopParameter.RED_IN_BUFF_PERC, effect=TaskEffect.REDUCE, min_value=0.0, max_value=0.8),
        BooleanParamDescriptor(
            parameter=HadoopParameter.COMPRESS_OUT, effect=TaskEffect.REDUCE),
    ], exclude)


def _add_effect_both_parameters(space: ParameterSpace, conf: Mapping[str, str], exclude: Set[str]) -> None:
    candidates = [
        IntegerParamDescriptor(
            parameter=HadoopParameter.SORT_FACTOR, effect=TaskEffect.BOTH, min_value=2, max_value=100),
        BooleanParamDescriptor(
            parameter=HadoopParameter.COMPRESS_MAP_OUT, effect=TaskEffect.BOTH),
    ]
    if has_combiner(conf):
        candidates.append(BooleanParamDescriptor(parameter=HadoopParameter.COMBINE, effect=TaskEffect.BOTH))

    _add_unless_excluded(space, candidates, exclude)


def _add_unless_excluded(space: ParameterSpace, descriptors, exclude: Set[str]) -> None:
    for descriptor in descriptors:
        if descriptor.parameter not in exclude:
            space.add_parameter_descriptor(descriptor)
