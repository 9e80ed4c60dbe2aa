"""
Sign recognition from hand landmarks.
Maps one frame's 21 landmarks to a sign label with an ordered list of
geometric rules.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple
import math

from .landmarks import HandLandmarks


class GestureLabel(str, Enum):
    """Recognized signs, listed in rule priority order."""
    I_LOVE_YOU = "I Love You"
    Y_ROCK_ON = "Y / Rock On"
    V_PEACE = "V / Peace / 2"
    K = "K"
    U_NO = "U / No"
    W_WATER = "W / 6 / Water"
    B = "B"
    HELLO = "Hello / Open Hand"
    STOP = "Stop / Open Hand"
    F_OK = "F / OK"
    L_LOSER = "L / Loser"
    I_J = "I / J"
    S_YES = "S / Yes"
    A_SORRY = "A / Sorry"
    E = "E"
    T = "T"
    N = "N"
    M = "M"
    D_ONE = "D / 1"
    C_DRINK = "C / Drink"
    G = "G"
    Q = "Q"
    H = "H"
    X = "X"
    P = "P"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def vocabulary(cls) -> List["GestureLabel"]:
        """All recognizable signs (excludes UNKNOWN)."""
        return [label for label in cls if label is not cls.UNKNOWN]


# Thresholds in normalized image units
EXTENDED_MARGIN = 0.02      # Tip must sit this far above its PIP joint
THUMB_SPREAD = 0.05         # Horizontal thumb tip to thumb MCP separation
FINGER_GAP = 0.05           # Index tip to middle tip for spread fingers
TOUCH_DISTANCE = 0.05       # Thumb tip touching another landmark
C_GAP_MIN = 0.08
C_GAP_MAX = 0.15
X_HOOK_DISTANCE = 0.04


@dataclass(frozen=True)
class HandFeatures:
    """Derived per-frame features the rules are written against."""
    thumb: bool
    index: bool
    middle: bool
    ring: bool
    pinky: bool
    thumb_index_dist: float
    index_middle_dist: float
    hand: HandLandmarks

    @property
    def fingers(self) -> Tuple[bool, bool, bool, bool]:
        """Extension of index, middle, ring, pinky."""
        return (self.index, self.middle, self.ring, self.pinky)

    def dist(self, i: int, j: int) -> float:
        return _distance_2d(self.hand.get(i), self.hand.get(j))


def _distance_2d(p1, p2) -> float:
    """2D distance between two landmarks (ignoring z)."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def _is_extended(hand: HandLandmarks, tip: int, pip: int) -> bool:
    return hand.y(tip) < hand.y(pip) - EXTENDED_MARGIN


def extract_features(hand: HandLandmarks) -> HandFeatures:
    """Compute finger extension flags and key distances for one frame."""
    return HandFeatures(
        # Thumb moves sideways, so it is judged on x instead of y
        thumb=abs(hand.x(HandLandmarks.THUMB_TIP) - hand.x(HandLandmarks.THUMB_MCP)) > THUMB_SPREAD,
        index=_is_extended(hand, HandLandmarks.INDEX_TIP, HandLandmarks.INDEX_PIP),
        middle=_is_extended(hand, HandLandmarks.MIDDLE_TIP, HandLandmarks.MIDDLE_PIP),
        ring=_is_extended(hand, HandLandmarks.RING_TIP, HandLandmarks.RING_PIP),
        pinky=_is_extended(hand, HandLandmarks.PINKY_TIP, HandLandmarks.PINKY_PIP),
        thumb_index_dist=_distance_2d(hand.thumb_tip, hand.index_tip),
        index_middle_dist=_distance_2d(hand.index_tip, hand.middle_tip),
        hand=hand,
    )


# Finger patterns (index, middle, ring, pinky)
_FIST = (False, False, False, False)
_INDEX_ONLY = (True, False, False, False)
_TWO_FINGERS = (True, True, False, False)
_THREE_FINGERS = (True, True, True, False)
_FOUR_FINGERS = (True, True, True, True)
_PINKY_ONLY = (False, False, False, True)


def _fist_shape(f: HandFeatures) -> GestureLabel:
    """Tell fist-based letters apart by where the thumb rests."""
    hand = f.hand
    tx, ty = hand.thumb_tip[0], hand.thumb_tip[1]

    if hand.y(HandLandmarks.INDEX_MCP) < ty < hand.y(HandLandmarks.MIDDLE_PIP):
        return GestureLabel.S_YES
    if abs(tx - hand.index_tip[0]) > THUMB_SPREAD and ty < hand.y(HandLandmarks.INDEX_MCP):
        return GestureLabel.A_SORRY
    if ty > hand.y(HandLandmarks.RING_MCP):
        return GestureLabel.E
    if hand.x(HandLandmarks.INDEX_MCP) < tx < hand.x(HandLandmarks.MIDDLE_MCP):
        return GestureLabel.T
    if hand.x(HandLandmarks.MIDDLE_MCP) < tx < hand.x(HandLandmarks.RING_MCP):
        return GestureLabel.N
    if hand.x(HandLandmarks.RING_MCP) < tx < hand.x(HandLandmarks.PINKY_MCP):
        return GestureLabel.M
    return GestureLabel.S_YES


def _index_points_sideways(f: HandFeatures) -> bool:
    hand = f.hand
    dx = abs(hand.index_tip[0] - hand.x(HandLandmarks.INDEX_MCP))
    dy = abs(hand.index_tip[1] - hand.y(HandLandmarks.INDEX_MCP))
    return dx > dy


def _index_points_down(f: HandFeatures) -> bool:
    return f.hand.index_tip[1] > f.hand.y(HandLandmarks.INDEX_PIP)


@dataclass(frozen=True)
class SignRule:
    """One entry of the decision list: the first matching rule wins."""
    name: str
    predicate: Callable[[HandFeatures], bool]
    label: Callable[[HandFeatures], GestureLabel]


def _fixed(label: GestureLabel) -> Callable[[HandFeatures], GestureLabel]:
    return lambda f: label


RULES: Tuple[SignRule, ...] = (
    SignRule(
        "i_love_you",
        lambda f: f.thumb and f.index and not f.middle and not f.ring and f.pinky,
        _fixed(GestureLabel.I_LOVE_YOU),
    ),
    SignRule(
        "y_rock_on",
        lambda f: f.thumb and not f.index and not f.middle and not f.ring and f.pinky,
        _fixed(GestureLabel.Y_ROCK_ON),
    ),
    SignRule(
        "v_peace",
        lambda f: f.fingers == _TWO_FINGERS and f.index_middle_dist > FINGER_GAP,
        _fixed(GestureLabel.V_PEACE),
    ),
    SignRule(
        "k",
        lambda f: f.fingers == _TWO_FINGERS and (
            f.dist(HandLandmarks.THUMB_TIP, HandLandmarks.MIDDLE_PIP) < TOUCH_DISTANCE
            or f.dist(HandLandmarks.THUMB_TIP, HandLandmarks.MIDDLE_DIP) < TOUCH_DISTANCE
        ),
        _fixed(GestureLabel.K),
    ),
    SignRule("u_no", lambda f: f.fingers == _TWO_FINGERS, _fixed(GestureLabel.U_NO)),
    SignRule("w_water", lambda f: f.fingers == _THREE_FINGERS, _fixed(GestureLabel.W_WATER)),
    SignRule(
        "b",
        lambda f: f.fingers == _FOUR_FINGERS and (
            not f.thumb or f.hand.thumb_tip[0] < f.hand.index_tip[0]
        ),
        _fixed(GestureLabel.B),
    ),
    SignRule(
        "hello",
        lambda f: f.fingers == _FOUR_FINGERS and f.index_middle_dist > FINGER_GAP,
        _fixed(GestureLabel.HELLO),
    ),
    SignRule("stop", lambda f: f.fingers == _FOUR_FINGERS, _fixed(GestureLabel.STOP)),
    SignRule(
        "f_ok",
        lambda f: f.fingers == (False, True, True, True) and f.thumb_index_dist < TOUCH_DISTANCE,
        _fixed(GestureLabel.F_OK),
    ),
    SignRule(
        "l_loser",
        lambda f: f.thumb and f.fingers == _INDEX_ONLY,
        _fixed(GestureLabel.L_LOSER),
    ),
    SignRule(
        "i_j",
        lambda f: f.fingers == _PINKY_ONLY and not f.thumb,
        _fixed(GestureLabel.I_J),
    ),
    SignRule("fist", lambda f: f.fingers == _FIST, _fist_shape),
    SignRule("d_one", lambda f: f.fingers == _INDEX_ONLY, _fixed(GestureLabel.D_ONE)),
    # Shadowed by the rules above for every hand shape.
    SignRule(
        "c_drink",
        lambda f: f.fingers == _FIST and C_GAP_MIN < f.thumb_index_dist < C_GAP_MAX,
        _fixed(GestureLabel.C_DRINK),
    ),
    SignRule(
        "q",
        lambda f: f.fingers == _INDEX_ONLY and _index_points_down(f),
        _fixed(GestureLabel.Q),
    ),
    SignRule(
        "g",
        lambda f: f.fingers == _INDEX_ONLY and _index_points_sideways(f),
        _fixed(GestureLabel.G),
    ),
    SignRule(
        "h",
        lambda f: f.fingers == _TWO_FINGERS and _index_points_sideways(f),
        _fixed(GestureLabel.H),
    ),
    SignRule(
        "x",
        lambda f: f.fingers == _FIST
        and f.dist(HandLandmarks.INDEX_TIP, HandLandmarks.INDEX_PIP) < X_HOOK_DISTANCE,
        _fixed(GestureLabel.X),
    ),
    SignRule(
        "p",
        lambda f: f.fingers == _TWO_FINGERS and _index_points_down(f),
        _fixed(GestureLabel.P),
    ),
)


def classify_features(features: HandFeatures) -> GestureLabel:
    """Run the decision list over precomputed features."""
    for rule in RULES:
        if rule.predicate(features):
            return rule.label(features)
    return GestureLabel.UNKNOWN


def classify(hand: HandLandmarks) -> GestureLabel:
    """
    Classify one frame of landmarks.

    Deterministic and total: always returns a GestureLabel, UNKNOWN when no
    rule matches.
    """
    return classify_features(extract_features(hand))
