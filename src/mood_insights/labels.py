"""
Locale-aware labels for history buckets.

Covers the languages the journal ships with. Any other language tag falls
back to English formatting instead of raising.
"""

from datetime import date
from typing import Callable, Dict, Optional

DEFAULT_LANGUAGE = "en"

MONTH_NAMES: Dict[str, tuple] = {
    "en": ("January", "February", "March", "April", "May", "June",
           "July", "August", "September", "October", "November", "December"),
    "es": ("enero", "febrero", "marzo", "abril", "mayo", "junio",
           "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre"),
    "fr": ("janvier", "février", "mars", "avril", "mai", "juin",
           "juillet", "août", "septembre", "octobre", "novembre", "décembre"),
    "de": ("Januar", "Februar", "März", "April", "Mai", "Juni",
           "Juli", "August", "September", "Oktober", "November", "Dezember"),
    "da": ("januar", "februar", "marts", "april", "maj", "juni",
           "juli", "august", "september", "oktober", "november", "december"),
    "pl": ("styczeń", "luty", "marzec", "kwiecień", "maj", "czerwiec",
           "lipiec", "sierpień", "wrzesień", "październik", "listopad", "grudzień"),
}

MONTH_ABBREVIATIONS: Dict[str, tuple] = {
    "en": ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    "es": ("ene", "feb", "mar", "abr", "may", "jun",
           "jul", "ago", "sept", "oct", "nov", "dic"),
    "fr": ("janv.", "févr.", "mars", "avr.", "mai", "juin",
           "juil.", "août", "sept.", "oct.", "nov.", "déc."),
    "de": ("Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
           "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez."),
    "da": ("jan.", "feb.", "mar.", "apr.", "maj", "jun.",
           "jul.", "aug.", "sep.", "okt.", "nov.", "dec."),
    "pl": ("sty", "lut", "mar", "kwi", "maj", "cze",
           "lip", "sie", "wrz", "paź", "lis", "gru"),
}

# "{month} {year}" style patterns for month headers
MONTH_YEAR_FORMATS = {
    "en": "{month} {year}",
    "es": "{month} de {year}",
    "fr": "{month} {year}",
    "de": "{month} {year}",
    "da": "{month} {year}",
    "pl": "{month} {year}",
}

# Short "day month" patterns used in week date ranges
SHORT_DATE_FORMATS = {
    "en": "{month} {day}",
    "es": "{day} {month}",
    "fr": "{day} {month}",
    "de": "{day}. {month}",
    "da": "{day}. {month}",
    "pl": "{day} {month}",
}

UI_STRINGS: Dict[str, Dict[str, str]] = {
    "week": {
        "en": "Week",
        "es": "Semana",
        "fr": "Semaine",
        "de": "Woche",
        "da": "Uge",
        "pl": "Tydzień",
    },
}

SUPPORTED_LANGUAGES = tuple(MONTH_NAMES.keys())


def resolve_language(tag: Optional[str], default: str = DEFAULT_LANGUAGE) -> str:
    """
    Reduce a BCP-47-like tag ("de-AT", "pt_BR") to a supported language.

    Args:
        tag: Language tag from preferences or the host
        default: Language used when the tag is empty or unsupported

    Returns:
        A key of SUPPORTED_LANGUAGES
    """
    if not tag or not isinstance(tag, str):
        return default
    primary = tag.strip().replace("_", "-").split("-")[0].lower()
    return primary if primary in SUPPORTED_LANGUAGES else default


def month_label(year: int, month: int, language: Optional[str] = None) -> str:
    """Localized "Month Year" header, e.g. "March 2024"."""
    lang = resolve_language(language)
    return MONTH_YEAR_FORMATS[lang].format(month=MONTH_NAMES[lang][month - 1], year=year)


def short_date(d: date, language: Optional[str] = None) -> str:
    """Localized short date without year, e.g. "Mar 4"."""
    lang = resolve_language(language)
    return SHORT_DATE_FORMATS[lang].format(month=MONTH_ABBREVIATIONS[lang][d.month - 1], day=d.day)


def date_range_label(start: date, end: date, language: Optional[str] = None) -> str:
    """Localized week span, e.g. "Mar 4 – Mar 10"."""
    return f"{short_date(start, language)} – {short_date(end, language)}"


def translator(language: Optional[str] = None) -> Callable[[str], str]:
    """
    Build a lookup for the few UI strings the history view needs.

    Unknown keys are returned unchanged, so activity tags pass through as
    their own display names.
    """
    lang = resolve_language(language)

    def translate(key: str) -> str:
        return UI_STRINGS.get(key, {}).get(lang, key)

    return translate
