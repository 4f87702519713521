"""Languages supported by the Google Cloud Translation v2 API."""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

# (display name, accepted codes, code standard note) in help-page order.
LANGUAGE_TABLE: Tuple[Tuple[str, Tuple[str, ...], str], ...] = (
    ("Afrikaans", ("af",), ""),
    ("Albanian", ("sq",), ""),
    ("Amharic", ("am",), ""),
    ("Arabic", ("ar",), ""),
    ("Armenian", ("hy",), ""),
    ("Azerbaijani", ("az",), ""),
    ("Basque", ("eu",), ""),
    ("Belarusian", ("be",), ""),
    ("Bengali", ("bn",), ""),
    ("Bosnian", ("bs",), ""),
    ("Bulgarian", ("bg",), ""),
    ("Catalan", ("ca",), ""),
    ("Cebuano", ("ceb",), "ISO-639-2"),
    ("Chinese (Simplified)", ("zh-CN", "zh"), "BCP-47"),
    ("Chinese (Traditional)", ("zh-TW",), "BCP-47"),
    ("Corsican", ("co",), ""),
    ("Croatian", ("hr",), ""),
    ("Czech", ("cs",), ""),
    ("Danish", ("da",), ""),
    ("Dutch", ("nl",), ""),
    ("English", ("en",), ""),
    ("Esperanto", ("eo",), ""),
    ("Estonian", ("et",), ""),
    ("Finnish", ("fi",), ""),
    ("French", ("fr",), ""),
    ("Frisian", ("fy",), ""),
    ("Galician", ("gl",), ""),
    ("Georgian", ("ka",), ""),
    ("German", ("de",), ""),
    ("Greek", ("el",), ""),
    ("Gujarati", ("gu",), ""),
    ("Haitian Creole", ("ht",), ""),
    ("Hausa", ("ha",), ""),
    ("Hawaiian", ("haw",), "ISO-639-2"),
    ("Hebrew", ("he", "iw"), ""),
    ("Hindi", ("hi",), ""),
    ("Hmong", ("hmn",), "ISO-639-2"),
    ("Hungarian", ("hu",), ""),
    ("Icelandic", ("is",), ""),
    ("Igbo", ("ig",), ""),
    ("Indonesian", ("id",), ""),
    ("Irish", ("ga",), ""),
    ("Italian", ("it",), ""),
    ("Japanese", ("ja",), ""),
    ("Javanese", ("jv",), ""),
    ("Kannada", ("kn",), ""),
    ("Kazakh", ("kk",), ""),
    ("Khmer", ("km",), ""),
    ("Kinyarwanda", ("rw",), ""),
    ("Korean", ("ko",), ""),
    ("Kurdish", ("ku",), ""),
    ("Kyrgyz", ("ky",), ""),
    ("Lao", ("lo",), ""),
    ("Latin", ("la",), ""),
    ("Latvian", ("lv",), ""),
    ("Lithuanian", ("lt",), ""),
    ("Luxembourgish", ("lb",), ""),
    ("Macedonian", ("mk",), ""),
    ("Malagasy", ("mg",), ""),
    ("Malay", ("ms",), ""),
    ("Malayalam", ("ml",), ""),
    ("Maltese", ("mt",), ""),
    ("Maori", ("mi",), ""),
    ("Marathi", ("mr",), ""),
    ("Mongolian", ("mn",), ""),
    ("Myanmar (Burmese)", ("my",), ""),
    ("Nepali", ("ne",), ""),
    ("Norwegian", ("no",), ""),
    ("Nyanja (Chichewa)", ("ny",), ""),
    ("Odia (Oriya)", ("or",), ""),
    ("Pashto", ("ps",), ""),
    ("Persian", ("fa",), ""),
    ("Polish", ("pl",), ""),
    ("Portuguese (Portugal, Brazil)", ("pt",), ""),
    ("Punjabi", ("pa",), ""),
    ("Romanian", ("ro",), ""),
    ("Russian", ("ru",), ""),
    ("Samoan", ("sm",), ""),
    ("Scots Gaelic", ("gd",), ""),
    ("Serbian", ("sr",), ""),
    ("Sesotho", ("st",), ""),
    ("Shona", ("sn",), ""),
    ("Sindhi", ("sd",), ""),
    ("Sinhala (Sinhalese)", ("si",), ""),
    ("Slovak", ("sk",), ""),
    ("Slovenian", ("sl",), ""),
    ("Somali", ("so",), ""),
    ("Spanish", ("es",), ""),
    ("Sundanese", ("su",), ""),
    ("Swahili", ("sw",), ""),
    ("Swedish", ("sv",), ""),
    ("Tagalog (Filipino)", ("tl",), ""),
    ("Tajik", ("tg",), ""),
    ("Tamil", ("ta",), ""),
    ("Tatar", ("tt",), ""),
    ("Telugu", ("te",), ""),
    ("Thai", ("th",), ""),
    ("Turkish", ("tr",), ""),
    ("Turkmen", ("tk",), ""),
    ("Ukrainian", ("uk",), ""),
    ("Urdu", ("ur",), ""),
    ("Uyghur", ("ug",), ""),
    ("Uzbek", ("uz",), ""),
    ("Vietnamese", ("vi",), ""),
    ("Welsh", ("cy",), ""),
    ("Xhosa", ("xh",), ""),
    ("Yiddish", ("yi",), ""),
    ("Yoruba", ("yo",), ""),
    ("Zulu", ("zu",), ""),
)

ALLOWED_LANGUAGE_CODES: Tuple[str, ...] = tuple(
    code for _, codes, _ in LANGUAGE_TABLE for code in codes
)
ALLOWED_LANGUAGES: FrozenSet[str] = frozenset(ALLOWED_LANGUAGE_CODES)

LANGUAGE_NAMES: Dict[str, str] = {
    code: name for name, codes, _ in LANGUAGE_TABLE for code in codes
}


def is_allowed(code: str) -> bool:
    """Case-sensitive membership check against the allow-list."""
    return code in ALLOWED_LANGUAGES


def format_language_line(name: str, codes: Tuple[str, ...], standard: str) -> str:
    line = f"{name} - {' or '.join(codes)}"
    if standard:
        line = f"{line} ({standard})"
    return line
