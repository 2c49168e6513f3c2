"""Piecewise-constant intensity ranges stored as breakpoints in an OrderedMap."""

import logging
import math

from rangelist.ordered_map import Number, OrderedMap

logger = logging.getLogger(__name__)

DEFAULT_INTENSITY = 0


def _require_finite(**values: Number) -> None:
    """Reject NaN and infinite arguments.

    Args:
        **values: Argument names mapped to the numbers to check.
    """
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be a finite number, got {value!r}")


class RangeList:
    """Intensity over a numeric axis, updated by range add and range set.

    Each stored breakpoint ``(position, intensity)`` holds from its position
    up to the next breakpoint; positions before the first breakpoint have
    intensity 0. After every mutation no two adjacent breakpoints share an
    intensity and the first breakpoint is never 0.
    """

    def __init__(self):
        self._map = OrderedMap()

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"RangeList({self.to_array()!r})"

    @property
    def map(self) -> OrderedMap:
        """The backing ordered map of breakpoints."""
        return self._map

    def add(self, from_: Number, to: Number, amount: Number) -> None:
        """Add ``amount`` to the intensity over ``[from_, to)``.

        Args:
            from_: Inclusive start of the range.
            to: Exclusive end of the range.
            amount: Intensity delta to apply.
        """
        _require_finite(from_=from_, to=to, amount=amount)
        if from_ >= to or amount == 0:
            return

        logger.debug("add [%s, %s) %+g", from_, to, amount)
        self._ensure_point_exists(from_)
        self._ensure_point_exists(to)
        self._adjust_intensities(from_, to, amount)
        self._cleanup_redundant_points()

    def set(self, from_: Number, to: Number, amount: Number) -> None:
        """Overwrite the intensity over ``[from_, to)`` with ``amount``.

        Intensities at and after ``to`` are left as they were.

        Args:
            from_: Inclusive start of the range.
            to: Exclusive end of the range.
            amount: Intensity to hold across the range.
        """
        _require_finite(from_=from_, to=to, amount=amount)
        if from_ >= to:
            return

        logger.debug("set [%s, %s) = %g", from_, to, amount)
        intensity_after_range = self.intensity_at(to)

        self._ensure_point_exists(from_)
        self._ensure_point_exists(to)
        self._remove_points_in_range(from_, to)

        self._map.update(from_, amount)
        self._map.update(to, intensity_after_range)
        self._cleanup_redundant_points()

    def intensity_at(self, position: Number) -> Number:
        """Return the intensity in effect at ``position``.

        Args:
            position: Position on the axis.

        Returns:
            Value of the nearest breakpoint at or before the position, or 0.
        """
        _require_finite(position=position)
        node = self._map.find_less_than_or_equal(position)
        return node.value if node else DEFAULT_INTENSITY

    def clear(self) -> None:
        """Drop every breakpoint."""
        self._map = OrderedMap()

    def to_array(self) -> list[tuple[Number, Number]]:
        """Export the breakpoints as ``(position, intensity)`` pairs.

        Returns:
            Breakpoints in increasing position order.
        """
        return self._map.in_order_traversal()

    # --- Internal Utilities ---

    def _ensure_point_exists(self, position: Number) -> None:
        node = self._map.find_nearest(position)
        if node is None or node.key != position:
            self._map.insert(position, self.intensity_at(position))

    def _adjust_intensities(self, from_: Number, to: Number, amount: Number) -> None:
        # get_keys_in_range is inclusive; the point at ``to`` keeps its value
        for position in self._map.get_keys_in_range(from_, to):
            if position >= to:
                continue
            node = self._map.find(position)
            self._map.update(position, node.value + amount)

    def _remove_points_in_range(self, from_: Number, to: Number) -> None:
        for position in self._map.get_keys_in_range(from_, to):
            if from_ < position < to:
                self._map.remove(position)

    def _cleanup_redundant_points(self) -> None:
        """Remove breakpoints that repeat the intensity before them.

        Decisions are taken against a snapshot of the points taken before any
        removal.
        """
        points = self._map.in_order_traversal()
        to_remove = []

        if points and points[0][1] == DEFAULT_INTENSITY:
            to_remove.append(points[0][0])

        for i in range(len(points) - 1, 0, -1):
            if points[i][1] == points[i - 1][1]:
                to_remove.append(points[i][0])

        for key in to_remove:
            self._map.remove(key)
        if to_remove:
            logger.debug("removed redundant breakpoints %s", to_remove)
