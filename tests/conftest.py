import pytest
from src.detection.landmarks import HandLandmarks

# Upright hand facing the camera, y grows downwards
FINGER_X = {"index": 0.40, "middle": 0.46, "ring": 0.52, "pinky": 0.58}
FINGER_BASE = {"index": 5, "middle": 9, "ring": 13, "pinky": 17}
MCP_Y = 0.60

# (pip, dip, tip) y positions
EXTENDED_Y = (0.50, 0.40, 0.32)
CURLED_Y = (0.66, 0.70, 0.68)

RESTING_THUMB = (0.36, 0.72)   # Close to the thumb MCP x, not extended
SPREAD_THUMB = (0.25, 0.65)    # Far out to the side, extended


def make_hand(index=False, middle=False, ring=False, pinky=False,
              thumb_tip=RESTING_THUMB, overrides=None):
    """
    Build a synthetic 21-point hand.

    Args:
        index/middle/ring/pinky: Whether each finger is extended
        thumb_tip: (x, y) of landmark 4
        overrides: {index: (x, y)} applied last
    """
    points = [None] * 21
    points[0] = (0.50, 0.90)
    points[1] = (0.40, 0.82)
    points[2] = (0.34, 0.74)
    points[3] = (0.33, 0.70)
    points[4] = thumb_tip

    extended = {"index": index, "middle": middle, "ring": ring, "pinky": pinky}
    for name, base in FINGER_BASE.items():
        x = FINGER_X[name]
        pip_y, dip_y, tip_y = EXTENDED_Y if extended[name] else CURLED_Y
        points[base] = (x, MCP_Y)
        points[base + 1] = (x, pip_y)
        points[base + 2] = (x, dip_y)
        points[base + 3] = (x, tip_y)

    for idx, point in (overrides or {}).items():
        points[idx] = point

    return HandLandmarks.from_points(points, handedness="Right", confidence=0.9)


@pytest.fixture
def hand_factory():
    return make_hand
