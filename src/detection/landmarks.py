"""
Hand landmark containers shared by the tracker and the classifier.
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple

NUM_LANDMARKS = 21

Landmark = Tuple[float, float, float]


@dataclass(frozen=True)
class HandLandmarks:
    """
    Normalized hand landmarks for one hand in one frame.

    Attributes:
        landmarks: 21 (x, y, z) tuples, normalized 0-1, y grows downwards
        handedness: 'Left', 'Right' or 'Unknown'
        confidence: Detection confidence 0-1
    """
    landmarks: Tuple[Landmark, ...]
    handedness: str = "Unknown"
    confidence: float = 1.0

    # MediaPipe landmark indices
    WRIST = 0
    THUMB_CMC = 1
    THUMB_MCP = 2
    THUMB_IP = 3
    THUMB_TIP = 4
    INDEX_MCP = 5
    INDEX_PIP = 6
    INDEX_DIP = 7
    INDEX_TIP = 8
    MIDDLE_MCP = 9
    MIDDLE_PIP = 10
    MIDDLE_DIP = 11
    MIDDLE_TIP = 12
    RING_MCP = 13
    RING_PIP = 14
    RING_DIP = 15
    RING_TIP = 16
    PINKY_MCP = 17
    PINKY_PIP = 18
    PINKY_DIP = 19
    PINKY_TIP = 20

    def __post_init__(self):
        if len(self.landmarks) != NUM_LANDMARKS:
            raise ValueError(
                f"Expected {NUM_LANDMARKS} hand landmarks, got {len(self.landmarks)}"
            )

    @classmethod
    def from_points(
        cls,
        points: Sequence,
        handedness: str = "Unknown",
        confidence: float = 1.0,
    ) -> "HandLandmarks":
        """
        Build from (x, y), (x, y, z) sequences or objects with x/y/z attributes
        (MediaPipe NormalizedLandmark).
        """
        converted: List[Landmark] = []
        for p in points:
            if hasattr(p, "x"):
                converted.append((float(p.x), float(p.y), float(getattr(p, "z", 0.0))))
            elif len(p) == 2:
                converted.append((float(p[0]), float(p[1]), 0.0))
            else:
                converted.append((float(p[0]), float(p[1]), float(p[2])))
        return cls(landmarks=tuple(converted), handedness=handedness, confidence=confidence)

    def get(self, index: int) -> Landmark:
        """Get landmark by index."""
        return self.landmarks[index]

    def x(self, index: int) -> float:
        return self.landmarks[index][0]

    def y(self, index: int) -> float:
        return self.landmarks[index][1]

    @property
    def thumb_tip(self) -> Landmark:
        return self.landmarks[self.THUMB_TIP]

    @property
    def index_tip(self) -> Landmark:
        return self.landmarks[self.INDEX_TIP]

    @property
    def middle_tip(self) -> Landmark:
        return self.landmarks[self.MIDDLE_TIP]

    @property
    def ring_tip(self) -> Landmark:
        return self.landmarks[self.RING_TIP]

    @property
    def pinky_tip(self) -> Landmark:
        return self.landmarks[self.PINKY_TIP]

    @property
    def wrist(self) -> Landmark:
        return self.landmarks[self.WRIST]


# Hand connections for drawing (same as MediaPipe's HAND_CONNECTIONS)
HAND_CONNECTIONS = [
    (0, 1), (1, 2), (2, 3), (3, 4),      # Thumb
    (0, 5), (5, 6), (6, 7), (7, 8),      # Index
    (0, 9), (9, 10), (10, 11), (11, 12), # Middle
    (0, 13), (13, 14), (14, 15), (15, 16), # Ring
    (0, 17), (17, 18), (18, 19), (19, 20), # Pinky
    (5, 9), (9, 13), (13, 17),           # Palm
]
