"""
SignLingo Detection Module

Hand tracking, sign classification and temporal stabilization.
"""
from .config import Config, load_config
from .landmarks import HandLandmarks
from .sign_classifier import GestureLabel, classify
from .stabilizer import GestureStabilizer, PredictionWindow, StabilizedResult
from .session import DetectionSession, DetectionResult

__all__ = [
    'Config',
    'load_config',
    'HandLandmarks',
    'GestureLabel',
    'classify',
    'GestureStabilizer',
    'PredictionWindow',
    'StabilizedResult',
    'DetectionSession',
    'DetectionResult',
]
