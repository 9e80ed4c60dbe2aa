"""
Practice mode: compare the confirmed sign against a chosen target.
"""
from typing import Optional

# Targets offered in practice mode, matched against labels by substring
PRACTICE_TARGETS = (
    "A", "B", "C", "D", "E", "F", "G", "H", "I", "K", "L", "M", "N",
    "P", "Q", "S", "T", "U", "V", "W", "X", "Y",
    "Hello", "Stop", "Peace", "Yes", "No", "Sorry", "Water", "Drink",
    "OK", "I Love You", "Rock On",
)


def matches_target(target: Optional[str], confirmed: Optional[str]) -> bool:
    """
    Case-insensitive substring match of target within the confirmed label,
    so 'peace' matches 'V / Peace / 2'.
    """
    if not target or not confirmed:
        return False
    return target.lower() in str(confirmed).lower()


class PracticeSession:
    """Tracks one practice target and whether it has been signed."""

    def __init__(self, target: Optional[str] = None):
        self._target = target
        self._completed = False
        self._attempts = 0
        self._last_label = ""

    @property
    def target(self) -> Optional[str]:
        return self._target

    @target.setter
    def target(self, value: Optional[str]) -> None:
        self._target = value
        self._completed = False
        self._attempts = 0
        self._last_label = ""

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def attempts(self) -> int:
        """Distinct confirmed labels seen since the target was set."""
        return self._attempts

    def check(self, result) -> bool:
        """
        Verdict for the current StabilizedResult.

        Returns True while the confirmed label matches the target.
        """
        label = result.display_text
        if label and label != self._last_label:
            self._attempts += 1
        self._last_label = label

        correct = matches_target(self._target, label)
        if correct:
            self._completed = True
        return correct
