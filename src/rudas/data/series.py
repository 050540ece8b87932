"""One-dimensional array with axis labels."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import IO, Any, Generic, TypeVar

import numpy.typing as npt
import structlog
from attrs import define, field

from rudas.output.text import RenderConfig, format_series, render_series

from .errors import LengthMismatch
from .utils import (
    common_type_name,
    default_labels,
    detached_tuple,
    sequences_equal,
    to_numpy,
)

ValueT = TypeVar("ValueT")
LabelT = TypeVar("LabelT")
NewLabelT = TypeVar("NewLabelT")

logger = structlog.get_logger(__name__)


@define(slots=True, frozen=True, eq=False)
class Series(Generic[ValueT, LabelT]):
    """Ordered, fixed-length values paired positionally with axis labels.

    ``values`` and ``labels`` are always tuples of equal length; ``labels[i]``
    labels ``values[i]``. Labels need not be unique. Instances are frozen and
    hold deep copies of whatever was passed in, so every derivation below
    returns a new, independent Series.
    """

    values: tuple[ValueT, ...] = field(converter=detached_tuple)
    labels: tuple[LabelT, ...] = field(converter=detached_tuple)

    def __attrs_post_init__(self) -> None:
        """Reject value and label sequences of different lengths."""
        if len(self.values) != len(self.labels):
            logger.debug(
                "series.length_mismatch",
                values=len(self.values),
                labels=len(self.labels),
            )
            raise LengthMismatch(len(self.values), len(self.labels))

    @classmethod
    def from_values(cls, values: Iterable[ValueT]) -> Series[ValueT, int]:
        """Build a Series labeled by position, ``0..n-1``."""
        items = list(values)
        return cls(items, default_labels(len(items)))

    @classmethod
    def from_values_and_labels(
        cls, values: Iterable[ValueT], labels: Iterable[LabelT]
    ) -> Series[ValueT, LabelT]:
        """Build a Series with explicit labels.

        Raises:
            LengthMismatch: when ``values`` and ``labels`` differ in length.
        """
        return cls(values, labels)

    def duplicate(self) -> Series[ValueT, LabelT]:
        """Return an independent deep copy of this Series."""
        return Series(self.values, self.labels)

    def with_default_labels(self) -> Series[ValueT, int]:
        """Copy the values and relabel them by position."""
        return Series(self.values, default_labels(len(self.values)))

    def with_new_labels(self, labels: Iterable[NewLabelT]) -> Series[ValueT, NewLabelT]:
        """Copy the values under a new label sequence, possibly of another type.

        Raises:
            LengthMismatch: when ``labels`` does not match the number of values.
        """
        return Series(self.values, labels)

    def transpose(self) -> Series[ValueT, LabelT]:
        """Return the transpose, which for a single axis is this same instance."""
        return self

    @property
    def T(self) -> Series[ValueT, LabelT]:  # noqa: N802
        """Alias for :meth:`transpose`."""
        return self.transpose()

    @property
    def value_type(self) -> str:
        """Name of the type shared by every value, ``object`` when mixed or empty."""
        return common_type_name(self.values)

    def items(self) -> Iterator[tuple[LabelT, ValueT]]:
        """Yield ``(label, value)`` pairs in positional order."""
        return zip(self.labels, self.values)

    def to_numpy(self) -> npt.NDArray[Any]:
        """Return the values as a new NumPy array."""
        return to_numpy(self.values)

    def to_text(self, config: RenderConfig | None = None) -> str:
        """Return the listing produced by :meth:`render` as a string."""
        return format_series(self, config)

    def render(self, file: IO[str] | None = None, *, config: RenderConfig | None = None) -> None:
        """Print every ``label<TAB>value`` pair followed by the value type name."""
        render_series(self, file=file, config=config)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[ValueT]:
        return iter(self.values)

    def __getitem__(self, position: int) -> ValueT:
        return self.values[operator.index(position)]

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return sequences_equal(self.values, other.values) and sequences_equal(
            self.labels, other.labels
        )

    def __hash__(self) -> int:
        return hash((self.values, self.labels))

    def __copy__(self) -> Series[ValueT, LabelT]:
        return self.duplicate()

    def __deepcopy__(self, memo: dict[int, Any]) -> Series[ValueT, LabelT]:
        return self.duplicate()


__all__ = ["Series"]
