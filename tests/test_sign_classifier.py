import random

import pytest
from src.detection.landmarks import HandLandmarks
from src.detection.sign_classifier import (
    GestureLabel,
    RULES,
    classify,
    classify_features,
    extract_features,
)


def test_features_open_hand(hand_factory):
    f = extract_features(hand_factory(index=True, middle=True, ring=True, pinky=True))
    assert f.fingers == (True, True, True, True)
    assert f.thumb is False
    assert f.index_middle_dist == pytest.approx(0.06)


def test_features_thumb_uses_horizontal_spread(hand_factory):
    # Thumb tip far above its MCP but not to the side
    assert extract_features(hand_factory(thumb_tip=(0.36, 0.40))).thumb is False
    assert extract_features(hand_factory(thumb_tip=(0.25, 0.74))).thumb is True


def test_finger_needs_margin_to_count_as_extended(hand_factory):
    # Tip only 0.01 above its PIP
    hand = hand_factory(overrides={8: (0.40, 0.65)})
    assert extract_features(hand).index is False


@pytest.mark.parametrize("kwargs, expected", [
    (dict(index=True, pinky=True, thumb_tip=(0.25, 0.65)), GestureLabel.I_LOVE_YOU),
    (dict(pinky=True, thumb_tip=(0.25, 0.65)), GestureLabel.Y_ROCK_ON),
    (dict(index=True, middle=True), GestureLabel.V_PEACE),
    (dict(index=True, middle=True, thumb_tip=(0.45, 0.52), overrides={12: (0.43, 0.32)}), GestureLabel.K),
    (dict(index=True, middle=True, overrides={12: (0.43, 0.32)}), GestureLabel.U_NO),
    (dict(index=True, middle=True, ring=True), GestureLabel.W_WATER),
    (dict(index=True, middle=True, ring=True, pinky=True), GestureLabel.B),
    (dict(index=True, middle=True, ring=True, pinky=True, thumb_tip=(0.50, 0.70)), GestureLabel.HELLO),
    (dict(index=True, middle=True, ring=True, pinky=True, thumb_tip=(0.50, 0.70),
          overrides={12: (0.43, 0.32)}), GestureLabel.STOP),
    (dict(middle=True, ring=True, pinky=True, thumb_tip=(0.41, 0.70)), GestureLabel.F_OK),
    (dict(index=True, thumb_tip=(0.25, 0.65)), GestureLabel.L_LOSER),
    (dict(pinky=True), GestureLabel.I_J),
    (dict(index=True), GestureLabel.D_ONE),
])
def test_finger_patterns(hand_factory, kwargs, expected):
    assert classify(hand_factory(**kwargs)) is expected


@pytest.mark.parametrize("thumb, overrides, expected", [
    ((0.44, 0.63), {}, GestureLabel.S_YES),
    ((0.30, 0.45), {}, GestureLabel.A_SORRY),
    ((0.36, 0.72), {}, GestureLabel.E),
    ((0.43, 0.58), {}, GestureLabel.T),
    ((0.49, 0.58), {8: (0.47, 0.68)}, GestureLabel.N),
    ((0.55, 0.58), {8: (0.53, 0.68)}, GestureLabel.M),
    ((0.62, 0.58), {8: (0.60, 0.68)}, GestureLabel.S_YES),
])
def test_fist_group_by_thumb_position(hand_factory, thumb, overrides, expected):
    assert classify(hand_factory(thumb_tip=thumb, overrides=overrides)) is expected


def test_unmatched_shape_is_unknown(hand_factory):
    assert classify(hand_factory(middle=True)) is GestureLabel.UNKNOWN


def test_three_fingers_without_pinch_is_unknown(hand_factory):
    assert classify(hand_factory(middle=True, ring=True, pinky=True)) is GestureLabel.UNKNOWN


def test_first_matching_rule_wins(hand_factory):
    # The C / Drink predicate holds, but the fist group is checked first
    features = extract_features(hand_factory(thumb_tip=(0.32, 0.76)))
    c_rule = next(rule for rule in RULES if rule.name == "c_drink")
    assert c_rule.predicate(features)
    assert classify_features(features) is GestureLabel.E


def test_rule_order():
    names = [rule.name for rule in RULES]
    assert names == [
        "i_love_you", "y_rock_on", "v_peace", "k", "u_no", "w_water", "b",
        "hello", "stop", "f_ok", "l_loser", "i_j", "fist", "d_one",
        "c_drink", "q", "g", "h", "x", "p",
    ]


def test_vocabulary():
    vocab = GestureLabel.vocabulary()
    assert len(vocab) == 25
    assert GestureLabel.UNKNOWN not in vocab
    assert vocab[0] is GestureLabel.I_LOVE_YOU
    assert str(GestureLabel.V_PEACE) == "V / Peace / 2"


def test_deterministic_and_total():
    rng = random.Random(42)
    for _ in range(500):
        points = [(rng.random(), rng.random()) for _ in range(21)]
        hand = HandLandmarks.from_points(points)
        label = classify(hand)
        assert isinstance(label, GestureLabel)
        assert classify(hand) is label
