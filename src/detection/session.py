"""
Per-view detection session: classifier plus its own stabilizer.
"""
from dataclasses import dataclass
from typing import Optional

from .landmarks import HandLandmarks
from .sign_classifier import GestureLabel, classify
from .stabilizer import GestureStabilizer, StabilizedResult


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of one frame."""
    raw: Optional[GestureLabel]      # None when no hand was detected
    result: StabilizedResult
    hand: Optional[HandLandmarks] = None

    @property
    def hand_present(self) -> bool:
        return self.hand is not None


class DetectionSession:
    """
    Runs frames through the classifier and a session-owned stabilizer.

    Each camera view (main detection, practice camera) creates its own
    session so their windows never mix.
    """

    def __init__(self, capacity: int = 15, threshold: float = 0.6):
        self._stabilizer = GestureStabilizer(capacity=capacity, threshold=threshold)
        self._frame_count = 0

    @classmethod
    def from_config(cls, config) -> "DetectionSession":
        """Create from a StabilizerConfig."""
        return cls(capacity=config.capacity, threshold=config.threshold)

    def process(self, hand: Optional[HandLandmarks]) -> DetectionResult:
        """
        Process one frame.

        A frame without a hand skips classification and resets the window the
        same way an UNKNOWN classification does.
        """
        self._frame_count += 1

        if hand is None:
            self._stabilizer.reset()
            return DetectionResult(raw=None, result=self._stabilizer.current)

        raw = classify(hand)
        result = self._stabilizer.update(raw)
        return DetectionResult(raw=raw, result=result, hand=hand)

    @property
    def current(self) -> StabilizedResult:
        return self._stabilizer.current

    @property
    def stabilizer(self) -> GestureStabilizer:
        return self._stabilizer

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def reset(self) -> None:
        self._stabilizer.reset()
        self._frame_count = 0
