import pytest
from src.detection.config import Config, load_config
from src.detection.landmarks import HandLandmarks


def test_missing_file_returns_defaults(tmp_path):
    config = load_config(tmp_path / "missing.yaml")
    assert config == Config()
    assert config.stabilizer.capacity == 15
    assert config.stabilizer.threshold == 0.6
    assert config.speech.min_confidence == 0.7
    assert config.speech.cooldown == 2.5


def test_partial_file_overrides_and_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "stabilizer:\n"
        "  capacity: 20\n"
        "  smoothing: 0.3\n"
        "speech:\n"
        "  enabled: true\n"
        "  locale: hi\n"
        "extra_section:\n"
        "  foo: 1\n"
    )
    config = load_config(path)
    assert config.stabilizer.capacity == 20
    assert config.stabilizer.threshold == 0.6
    assert config.speech.enabled is True
    assert config.speech.locale == "hi"
    assert config.camera.device_id == 0


def test_empty_file_returns_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == Config()


def test_repo_config_loads():
    config = load_config()
    assert config.stabilizer.capacity == 15
    assert config.mediapipe.min_detection_confidence == 0.5


# Landmarks


def test_landmarks_require_21_points():
    with pytest.raises(ValueError):
        HandLandmarks.from_points([(0.5, 0.5)] * 20)
    with pytest.raises(ValueError):
        HandLandmarks(landmarks=tuple([(0.5, 0.5, 0.0)] * 22))


def test_from_points_accepts_attribute_objects():
    class Point:
        def __init__(self, x, y, z):
            self.x, self.y, self.z = x, y, z

    hand = HandLandmarks.from_points([Point(i / 20, 1 - i / 20, 0.1) for i in range(21)])
    assert hand.get(HandLandmarks.INDEX_TIP) == pytest.approx((0.4, 0.6, 0.1))
    assert hand.x(20) == pytest.approx(1.0)
    assert hand.y(0) == pytest.approx(1.0)


def test_from_points_defaults_z():
    hand = HandLandmarks.from_points([(0.1, 0.2)] * 21, handedness="Left", confidence=0.8)
    assert hand.wrist == (0.1, 0.2, 0.0)
    assert hand.handedness == "Left"
    assert hand.confidence == 0.8
