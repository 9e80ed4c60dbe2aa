"""
SignLingo Feedback Module

Consumers of confirmed signs: speech gate and practice matching.
"""
from .practice import PRACTICE_TARGETS, PracticeSession, matches_target
from .speech import SpeechFeedback, utterance_text
from .translations import translate

__all__ = [
    'PRACTICE_TARGETS',
    'PracticeSession',
    'matches_target',
    'SpeechFeedback',
    'utterance_text',
    'translate',
]
