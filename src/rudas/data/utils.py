"""Common helper functions for labeled sequences."""

import copy
import operator
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar, cast

import numpy as np
import numpy.typing as npt

T = TypeVar("T")

DEFAULT_TYPE_NAME = "object"


def default_labels(length: int) -> tuple[int, ...]:
    """Return the positional labels ``0..length-1``."""
    if length < 0:
        raise ValueError("length must be non-negative.")
    return tuple(range(length))


def detached_tuple(items: Iterable[T]) -> tuple[T, ...]:
    """Materialize ``items`` into a tuple that shares no mutable state with the input."""
    # A 1D ndarray iterates into numpy scalars; deepcopy keeps them as-is.
    return tuple(copy.deepcopy(list(items)))


def common_type_name(values: Sequence[Any]) -> str:
    """Name the single type shared by ``values``, or ``object`` when there is none."""
    types = {type(value) for value in values}
    if len(types) != 1:
        return DEFAULT_TYPE_NAME
    return types.pop().__name__


def to_numpy(values: Sequence[Any]) -> npt.NDArray[Any]:
    """Copy the values into a new 1D NumPy array, using ``object`` dtype for mixed types."""
    arr: npt.NDArray[Any] | None = None
    if not values or common_type_name(values) != DEFAULT_TYPE_NAME:
        try:
            arr = np.asarray(values)
        except ValueError:
            # Ragged nested values cannot form a regular array.
            arr = None
    if arr is None or arr.ndim != 1:
        arr = np.empty(len(values), dtype=object)
        for index, value in enumerate(values):
            arr[index] = value
    return cast(npt.NDArray[Any], arr)


def elements_equal(left: Any, right: Any) -> bool:
    """Compare two elements, reducing NumPy element-wise results to a single bool."""
    if left is right:
        return True
    if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
        return bool(np.array_equal(left, right))
    return bool(operator.eq(left, right))


def sequences_equal(left: Sequence[Any], right: Sequence[Any]) -> bool:
    """Return True when both sequences have equal length and equal elements."""
    if len(left) != len(right):
        return False
    return all(elements_equal(a, b) for a, b in zip(left, right))


__all__ = [
    "DEFAULT_TYPE_NAME",
    "common_type_name",
    "default_labels",
    "detached_tuple",
    "elements_equal",
    "sequences_equal",
    "to_numpy",
]
