"""Band naming and data accessors for multi-dimensional pyramid variables.

A selector maps dimension names to either a single value (fixed slice) or a
list of values (one band per value). Several list-valued dimensions combine
into the Cartesian product of their values.
"""

from __future__ import annotations

import itertools
import json
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

import numpy as np

BAND_SEPARATOR = "_"
SPATIAL_DIMENSIONS = ("x", "y")

Selector = Mapping[str, Any]
Accessor = Callable[..., Any]


def _is_multi(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _band_labels(dimension: str, values: Sequence[Any]) -> List[str]:
    if values and isinstance(values[0], str):
        return [str(v) for v in values]
    return [f"{dimension}{BAND_SEPARATOR}{v}" for v in values]


def get_band_information(selector: Selector) -> Dict[str, Dict[str, Any]]:
    """Return band name -> {dimension: selected value} for every band combination."""
    axes = [dim for dim, value in selector.items() if _is_multi(value)]
    if not axes:
        return {}

    choices = [
        list(zip(_band_labels(dim, list(selector[dim])), selector[dim]))
        for dim in axes
    ]
    bands: Dict[str, Dict[str, Any]] = {}
    for combo in itertools.product(*choices):
        name = BAND_SEPARATOR.join(label for label, _ in combo)
        bands[name] = {dim: value for dim, (_, value) in zip(axes, combo)}
    return bands


def get_bands(variable: str, selector: Optional[Selector] = None) -> List[str]:
    band_names = list(get_band_information(selector or {}))
    return band_names or [variable]


def _coordinate_index(coordinates: Mapping[str, Sequence[Any]], dimension: str, value: Any) -> int:
    values = list(coordinates[dimension])
    try:
        return values.index(value)
    except ValueError as exc:
        raise KeyError(f"Value {value!r} not found in coordinates of {dimension!r}") from exc


def _picker(
    dimensions: Sequence[str],
    selector: Selector,
    band_values: Mapping[str, Any],
    coordinates: Mapping[str, Sequence[Any]],
) -> Accessor:
    def pick(data: np.ndarray, current: Optional[Selector] = None) -> np.ndarray:
        current = current or selector
        index: List[Any] = []
        for dim in dimensions:
            if dim in SPATIAL_DIMENSIONS or dim not in selector:
                index.append(slice(None))
                continue
            value = band_values[dim] if _is_multi(selector[dim]) else current[dim]
            index.append(_coordinate_index(coordinates, dim, value))
        return np.asarray(data)[tuple(index)]

    return pick


def get_accessors(
    dimensions: Sequence[str],
    bands: Sequence[str],
    selector: Optional[Selector] = None,
    coordinates: Optional[Mapping[str, Sequence[Any]]] = None,
) -> Dict[str, Accessor]:
    """Return band name -> accessor(data, selector) slicing that band out of an array."""
    selector = selector or {}
    coordinates = coordinates or {}
    if not selector:
        return {bands[0]: lambda data, *_: data}

    info = get_band_information(selector)
    return {
        band: _picker(dimensions, selector, info.get(band, {}), coordinates)
        for band in bands
    }


def collect_values(
    data: np.ndarray,
    dimensions: Sequence[str],
    coordinates: Mapping[str, Sequence[Any]],
    fixed: Optional[Mapping[str, int]] = None,
) -> Dict[Any, Any]:
    """Gather every value of `data` into nested dicts keyed by coordinate labels.

    Dimensions in `fixed` are pinned to the given index; every other dimension
    is expanded over all of its coordinates. The innermost level holds lists
    of values.
    """
    fixed = fixed or {}
    arr = np.asarray(data)
    axes = [
        [fixed[dim]] if dim in fixed else list(range(len(coordinates[dim])))
        for dim in dimensions
    ]

    result: Dict[Any, Any] = {}
    for indexes in itertools.product(*axes):
        labels = [
            coordinates[dim][idx]
            for dim, idx in zip(dimensions, indexes)
            if dim in coordinates and coordinates[dim][idx] is not None
        ]
        if not labels:
            continue
        node = result
        for label in labels[:-1]:
            node = node.setdefault(label, {})
        node.setdefault(labels[-1], []).append(arr[indexes].item())
    return result


def get_selector_hash(selector: Selector) -> str:
    return json.dumps(selector, separators=(",", ":"))
