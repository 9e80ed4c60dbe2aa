"""
Temporal stabilization of per-frame sign labels.

A GestureStabilizer keeps a rolling window of the most recent recognized
labels for one detection session and only confirms a label once it
dominates the window.
"""
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterator, Optional, Tuple

from .sign_classifier import GestureLabel


@dataclass(frozen=True)
class StabilizedResult:
    """Confirmed label and its share of the window (0 when nothing confirmed)."""
    label: Optional[GestureLabel] = None
    confidence: float = 0.0

    @classmethod
    def empty(cls) -> "StabilizedResult":
        return cls()

    @property
    def is_confirmed(self) -> bool:
        return self.label is not None

    @property
    def display_text(self) -> str:
        return self.label.value if self.label is not None else ""


class PredictionWindow:
    """Bounded FIFO of recent recognized labels. UNKNOWN is never stored."""

    def __init__(self, capacity: int):
        if not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Window capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._labels: Deque[GestureLabel] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, label: GestureLabel) -> None:
        if label is GestureLabel.UNKNOWN:
            raise ValueError("UNKNOWN labels reset the window and cannot be stored")
        self._labels.append(label)

    def clear(self) -> None:
        self._labels.clear()

    def most_frequent(self) -> Tuple[Optional[GestureLabel], int]:
        """
        Plurality label and its count.

        Ties go to the label that reached the highest count first while
        scanning oldest to newest.
        """
        counts: Dict[GestureLabel, int] = {}
        best: Optional[GestureLabel] = None
        best_count = 0
        for label in self._labels:
            counts[label] = counts.get(label, 0) + 1
            if counts[label] > best_count:
                best_count = counts[label]
                best = label
        return best, best_count

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[GestureLabel]:
        return iter(self._labels)


class GestureStabilizer:
    """
    Debounces raw classifier output into a confirmed label.

    One instance per detection session; instances share no state.
    """

    def __init__(self, capacity: int = 15, threshold: float = 0.6):
        """
        Args:
            capacity: Number of recent labels kept in the window
            threshold: Fraction of capacity the top label must exceed
        """
        if not 0.0 < threshold < 1.0:
            raise ValueError(f"Threshold must be in (0, 1), got {threshold!r}")
        self._window = PredictionWindow(capacity)
        self._threshold = threshold
        self._current = StabilizedResult.empty()

    @property
    def capacity(self) -> int:
        return self._window.capacity

    @property
    def threshold(self) -> float:
        return self._threshold

    @property
    def window(self) -> Tuple[GestureLabel, ...]:
        return tuple(self._window)

    @property
    def current(self) -> StabilizedResult:
        """Current confirmed result, without advancing state."""
        return self._current

    def update(self, raw: GestureLabel) -> StabilizedResult:
        """
        Feed one frame's raw label and return the current confirmed result.

        UNKNOWN clears the window and the confirmed result. Otherwise the
        result only changes when the plurality label crosses the threshold.
        """
        if raw is GestureLabel.UNKNOWN:
            self.reset()
            return self._current

        self._window.push(raw)
        best, count = self._window.most_frequent()

        # Denominator is the full capacity, so a partly filled window confirms later
        capacity = self._window.capacity
        if count > capacity * self._threshold:
            self._current = StabilizedResult(label=best, confidence=count / capacity)

        return self._current

    def reset(self) -> None:
        """Clear the window and the confirmed result."""
        self._window.clear()
        self._current = StabilizedResult.empty()
