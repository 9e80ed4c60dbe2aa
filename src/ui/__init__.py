"""
SignLingo UI Module

PyQt5 detection window.
"""
from .detection_window import DetectionWindow

__all__ = [
    'DetectionWindow',
]
