import pytest
from src.detection.config import StabilizerConfig
from src.detection.session import DetectionSession
from src.detection.sign_classifier import GestureLabel


@pytest.fixture
def session():
    return DetectionSession(capacity=5)


def test_confirms_held_sign(session, hand_factory):
    peace = hand_factory(index=True, middle=True)
    for _ in range(5):
        detection = session.process(peace)
    assert detection.raw is GestureLabel.V_PEACE
    assert detection.hand_present
    assert detection.result.label is GestureLabel.V_PEACE
    assert detection.result.confidence == pytest.approx(1.0)
    assert session.current is detection.result


def test_no_hand_skips_classification_and_resets(session, hand_factory):
    peace = hand_factory(index=True, middle=True)
    for _ in range(5):
        session.process(peace)

    detection = session.process(None)
    assert detection.raw is None
    assert not detection.hand_present
    assert not detection.result.is_confirmed
    assert session.stabilizer.window == ()


def test_unrecognized_hand_resets(session, hand_factory):
    for _ in range(5):
        session.process(hand_factory(index=True))

    detection = session.process(hand_factory(middle=True))
    assert detection.raw is GestureLabel.UNKNOWN
    assert detection.hand_present
    assert detection.result.confidence == 0.0


def test_sessions_are_independent(hand_factory):
    main = DetectionSession(capacity=5)
    practice = DetectionSession(capacity=5)
    for _ in range(5):
        main.process(hand_factory(pinky=True))
    assert main.current.label is GestureLabel.I_J
    assert practice.current.label is None
    assert practice.frame_count == 0


def test_from_config():
    session = DetectionSession.from_config(StabilizerConfig(capacity=7, threshold=0.5))
    assert session.stabilizer.capacity == 7
    assert session.stabilizer.threshold == 0.5


def test_frame_count_and_reset(session, hand_factory):
    session.process(None)
    session.process(hand_factory(index=True))
    assert session.frame_count == 2
    session.reset()
    assert session.frame_count == 0
    assert session.stabilizer.window == ()
