"""
Localization package: UI strings and care-value translations for the
two supported right-to-left locales.
"""

from .translations import (
    CARE_VALUE_TRANSLATIONS,
    DEFAULT_LOCALE,
    RTL_LOCALES,
    SUPPORTED_LOCALES,
    TRANSLATIONS,
    Locale,
    encyclopedia_language,
    get_labels,
    i18n_care_value,
    identification_language,
    is_supported_locale,
    text_direction,
    translate,
)

__all__ = [
    "CARE_VALUE_TRANSLATIONS",
    "DEFAULT_LOCALE",
    "RTL_LOCALES",
    "SUPPORTED_LOCALES",
    "TRANSLATIONS",
    "Locale",
    "encyclopedia_language",
    "get_labels",
    "i18n_care_value",
    "identification_language",
    "is_supported_locale",
    "text_direction",
    "translate",
]
