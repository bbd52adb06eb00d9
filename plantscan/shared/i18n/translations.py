# 📄 File: plantscan/shared/i18n/translations.py
# 🧭 Purpose (Layman Explanation):
# Holds every piece of text the scanner shows, in Hebrew and in Arabic, plus
# translations for care words like "Average" watering or "Part shade".
# 🧪 Purpose (Technical Summary):
# Static localization tables (UI strings and care-value translations) with
# key lookup helpers, text direction and per-locale content-language mapping.
# 🔗 Dependencies:
# typing, enum
# 🔄 Connected Modules / Calls From:
# Scan controller (labels, localized errors), HTML page rendering,
# Plant.id client (response language), enrichment service (Wikipedia language)

from enum import Enum
from typing import Dict, Optional


class Locale(str, Enum):
    """Supported UI locales."""
    HE = "he"    # Hebrew (primary)
    AR = "ar"    # Arabic (secondary)


DEFAULT_LOCALE = Locale.HE
SUPPORTED_LOCALES = [locale.value for locale in Locale]

# Both supported locales are right-to-left
RTL_LOCALES = {Locale.HE.value, Locale.AR.value}


TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "he": {
        "appTitle": "מזהה צמחים + מדריך טיפול",
        "language": "שפה",
        "hebrew": "עברית",
        "arabic": "العربية",
        "uploadLabel": "בחר/י תמונה או צלמי",
        "identify": "זהה",
        "results": "תוצאות",
        "pickAnother": "בחר/י תמונה אחרת",
        "careGuide": "מדריך טיפול",
        "description": "תיאור",
        "watering": "השקיה",
        "sunlight": "אור",
        "pruning": "גיזום",
        "hardiness": "עמידות לקור (אזור)",
        "tips": "טיפים",
        "pests": "מזיקים/מחלות",
        "indoor": "מתאים לגידול בבית",
        "yes": "כן",
        "no": "לא",
        "loading": "טוען...",
        "identifyFirst": "נא לזהות צמח תחילה",
        "errorApiKey": "חסרים מפתחות API — בדקו .env",
        "noMatches": "לא נמצאו התאמות",
    },
    "ar": {
        "appTitle": "تعرّف على النباتات + دليل العناية",
        "language": "اللغة",
        "hebrew": "עברית",
        "arabic": "العربية",
        "uploadLabel": "التقط صورة أو ارفع ملفًا",
        "identify": "تعرّف",
        "results": "النتائج",
        "pickAnother": "اختر صورة أخرى",
        "careGuide": "دليل العناية",
        "description": "الوصف",
        "watering": "الري",
        "sunlight": "الضوء",
        "pruning": "التقليم",
        "hardiness": "تحمّل البرودة (المنطقة)",
        "tips": "نصائح",
        "pests": "الآفات/الأمراض",
        "indoor": "مناسب للزراعة الداخلية",
        "yes": "نعم",
        "no": "لا",
        "loading": "جارٍ التحميل...",
        "identifyFirst": "رجاءً حدّد النبات أولًا",
        "errorApiKey": "مفاتيح API غير موجودة — تأكد من .env",
        "noMatches": "لا توجد تطابقات",
    },
}


# care field -> locale -> service value -> display value
CARE_VALUE_TRANSLATIONS: Dict[str, Dict[str, Dict[str, str]]] = {
    "watering": {
        "he": {"Frequent": "השקיה תכופה", "Average": "השקיה בינונית", "Minimum": "מעט השקיה", "None": "ללא השקיה"},
        "ar": {"Frequent": "ري متكرر", "Average": "ري متوسط", "Minimum": "ري قليل", "None": "دون ري"},
    },
    "sunlight": {
        "he": {"Full sun": "שמש מלאה", "Part shade": "חצי צל", "Full shade": "צל מלא"},
        "ar": {"Full sun": "شمس كاملة", "Part shade": "ظل جزئي", "Full shade": "ظل كامل"},
    },
}


def is_supported_locale(lang: Optional[str]) -> bool:
    return bool(lang) and lang in SUPPORTED_LOCALES


def get_labels(lang: str) -> Dict[str, str]:
    """
    Return the full UI string table for a locale.

    Lookups never fall back to the other locale: an unsupported code
    raises ``KeyError``.
    """
    return dict(TRANSLATIONS[lang])


def translate(lang: str, key: str) -> str:
    """Look up a single UI string."""
    return TRANSLATIONS[lang][key]


def i18n_care_value(lang: str, key: str, value):
    """
    Translate a care value such as a watering category.

    Values absent from the table (including ``None``) are returned unchanged.
    """
    if value is None:
        return value
    raw = value.value if isinstance(value, Enum) else value
    return CARE_VALUE_TRANSLATIONS.get(key, {}).get(lang, {}).get(raw, raw)


def text_direction(lang: str) -> str:
    return "rtl" if lang in RTL_LOCALES else "ltr"


def identification_language(lang: str) -> str:
    """Response language requested from the identification service."""
    return "ar" if lang == Locale.AR.value else "en"


def encyclopedia_language(lang: str) -> str:
    """Wikipedia edition queried for the species summary."""
    return "he" if lang == Locale.HE.value else "ar"
