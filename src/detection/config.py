"""
Config loader for SignLingo.
Loads YAML configuration with dataclass validation.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import yaml


@dataclass
class CameraConfig:
    device_id: int = 0
    width: int = 1280
    height: int = 720
    fps: int = 30


@dataclass
class MediaPipeConfig:
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5
    model_path: Optional[str] = None  # None -> models/hand_landmarker.task


@dataclass
class StabilizerConfig:
    capacity: int = 15       # Frames kept in the prediction window
    threshold: float = 0.6   # Fraction of capacity the top label must exceed


@dataclass
class SpeechConfig:
    enabled: bool = False
    locale: str = "en"
    min_confidence: float = 0.7
    cooldown: float = 2.5    # Seconds before repeating the same label


@dataclass
class UIConfig:
    show_preview: bool = True
    preview_fps: int = 15
    target_fps: int = 30


@dataclass
class Config:
    camera: CameraConfig = field(default_factory=CameraConfig)
    mediapipe: MediaPipeConfig = field(default_factory=MediaPipeConfig)
    stabilizer: StabilizerConfig = field(default_factory=StabilizerConfig)
    speech: SpeechConfig = field(default_factory=SpeechConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def _dict_to_dataclass(cls, data: dict):
    """Convert a dict to a dataclass, ignoring unknown keys."""
    if data is None:
        return cls()
    field_names = {f.name for f in cls.__dataclass_fields__.values()}
    filtered = {k: v for k, v in data.items() if k in field_names}
    return cls(**filtered)


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default config.yaml
                    in project root.

    Returns:
        Config dataclass with all settings.
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config.yaml"

    config_path = Path(config_path)

    if not config_path.exists():
        # Return defaults if no config file
        return Config()

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return Config(
        camera=_dict_to_dataclass(CameraConfig, data.get('camera')),
        mediapipe=_dict_to_dataclass(MediaPipeConfig, data.get('mediapipe')),
        stabilizer=_dict_to_dataclass(StabilizerConfig, data.get('stabilizer')),
        speech=_dict_to_dataclass(SpeechConfig, data.get('speech')),
        ui=_dict_to_dataclass(UIConfig, data.get('ui')),
    )
