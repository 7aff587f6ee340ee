"""Tab selection state."""

from __future__ import annotations

from typing import Sequence, Tuple

DEFAULT_TAB_LABELS = ("Tab0", "Tab1", "Tab2", "Tab3")


class NavigationState:
    """
    Ordered tab labels and the selected index.

    The tabs form a ring: moving past either end wraps around.
    """

    def __init__(self, labels: Sequence[str] = DEFAULT_TAB_LABELS, selected: int = 0) -> None:
        if not labels:
            raise ValueError("at least one tab label is required")
        if not 0 <= selected < len(labels):
            raise ValueError(f"selected index {selected} out of range for {len(labels)} tabs")
        self._labels: Tuple[str, ...] = tuple(labels)
        self._selected = selected

    @property
    def labels(self) -> Tuple[str, ...]:
        return self._labels

    @property
    def selected(self) -> int:
        return self._selected

    @property
    def current_label(self) -> str:
        return self._labels[self._selected]

    def advance(self) -> None:
        """Select the next tab, wrapping to the first."""
        self._selected = (self._selected + 1) % len(self._labels)

    def retreat(self) -> None:
        """Select the previous tab, wrapping to the last."""
        if self._selected > 0:
            self._selected -= 1
        else:
            self._selected = len(self._labels) - 1

    def __repr__(self) -> str:
        return f"NavigationState(labels={self._labels!r}, selected={self._selected})"
