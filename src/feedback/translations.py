"""
Localized display and speech text for sign labels.
"""
from typing import Dict

SUPPORTED_LOCALES = ("en", "hi")

HINDI_LABELS: Dict[str, str] = {
    "I Love You": "मैं तुमसे प्यार करता हूँ",
    "Y / Rock On": "Y / रॉक ऑन",
    "V / Peace / 2": "V / शांति / 2",
    "K": "K",
    "U / No": "U / नहीं",
    "W / 6 / Water": "W / 6 / पानी",
    "B": "B",
    "Hello / Open Hand": "नमस्ते / खुला हाथ",
    "Stop / Open Hand": "रुको / खुला हाथ",
    "F / OK": "F / ठीक है",
    "L / Loser": "L / हारने वाला",
    "I / J": "I / J",
    "S / Yes": "S / हाँ",
    "A / Sorry": "A / क्षमा करें",
    "E": "E",
    "T": "T",
    "N": "N",
    "M": "M",
    "D / 1": "D / 1",
    "C / Drink": "C / पीना",
    "G": "G",
    "Q": "Q",
    "H": "H",
    "X": "X",
    "P": "P",
    "Unknown": "अज्ञात",
}

_TABLES: Dict[str, Dict[str, str]] = {
    "hi": HINDI_LABELS,
}


def check_locale(locale: str) -> str:
    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported locale {locale!r}, expected one of {SUPPORTED_LOCALES}")
    return locale


def translate(label: str, locale: str = "en") -> str:
    """Translate a label, falling back to the English text."""
    label = str(label)
    return _TABLES.get(locale, {}).get(label, label)
