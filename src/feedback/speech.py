"""
Spoken feedback for confirmed signs.

SpeechFeedback decides when a confirmed label is worth announcing and hands
the text to a speak(text, lang) callable. Audio output itself is up to the
caller.
"""
from typing import Callable, Optional
import time

from .translations import check_locale, translate

LANGUAGE_TAGS = {
    "en": "en-US",
    "hi": "hi-IN",
}


def utterance_text(label: str, locale: str = "en") -> str:
    """Text to speak for a label: 'V / Peace / 2' -> 'V  or  Peace  or  2'."""
    return translate(label, locale).replace("/", " or ")


class SpeechFeedback:
    """
    Gate between the stabilizer and a speech synthesizer.

    A label is spoken when it is confirmed with enough confidence and either
    differs from the last spoken label or the cooldown has passed.
    """

    def __init__(
        self,
        speak: Callable[[str, str], None],
        min_confidence: float = 0.7,
        cooldown: float = 2.5,
        locale: str = "en",
        clock: Callable[[], float] = time.monotonic,
    ):
        self._speak = speak
        self._min_confidence = min_confidence
        self._cooldown = cooldown
        self._locale = check_locale(locale)
        self._clock = clock

        self._last_label: Optional[str] = None
        self._last_time: float = 0.0

    @classmethod
    def from_config(cls, config, speak: Callable[[str, str], None], **kwargs) -> "SpeechFeedback":
        """Create from a SpeechConfig."""
        return cls(
            speak,
            min_confidence=config.min_confidence,
            cooldown=config.cooldown,
            locale=config.locale,
            **kwargs,
        )

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, value: str) -> None:
        self._locale = check_locale(value)

    @property
    def language_tag(self) -> str:
        return LANGUAGE_TAGS[self._locale]

    def should_speak(self, label: str, confidence: float, now: float) -> bool:
        if not label or label == "Unknown":
            return False
        if confidence < self._min_confidence:
            return False
        if label == self._last_label and now - self._last_time < self._cooldown:
            return False
        return True

    def consider(self, result) -> Optional[str]:
        """
        Speak the result's label if the policy allows it.

        Args:
            result: StabilizedResult (anything with display_text and confidence)

        Returns:
            The spoken text, or None if nothing was spoken.
        """
        label = result.display_text
        now = self._clock()
        if not self.should_speak(label, result.confidence, now):
            return None

        text = utterance_text(label, self._locale)
        self._speak(text, self.language_tag)
        self._last_label = label
        self._last_time = now
        return text

    def reset(self) -> None:
        self._last_label = None
        self._last_time = 0.0
