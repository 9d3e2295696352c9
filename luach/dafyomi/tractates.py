"""Tractate tables for the Bavli and Yerushalmi Daf Yomi cycles."""

from ..models import DafCycle

# Pages per tractate. Shekalim (index 4) had 13 pages before the 8th cycle.
BAVLI_PAGES = (
    64, 157, 105, 121, 22, 88, 56, 40, 35, 31, 32, 29, 27, 122, 112, 91, 66, 49, 90, 82,
    119, 119, 176, 113, 24, 49, 76, 14, 120, 110, 142, 61, 34, 34, 28, 22, 4, 9, 5, 73,
)

YERUSHALMI_PAGES = (
    68, 37, 34, 44, 31, 59, 26, 33, 28, 20, 13, 92, 65, 71, 22, 22, 42, 26, 26, 33,
    34, 22, 19, 85, 72, 47, 40, 47, 54, 48, 44, 37, 34, 44, 9, 57, 37, 19, 13,
)

BAVLI_NAMES = (
    "Berachos",
    "Shabbos",
    "Eruvin",
    "Pesachim",
    "Shekalim",
    "Yoma",
    "Sukkah",
    "Beitzah",
    "Rosh Hashana",
    "Taanis",
    "Megillah",
    "Moed Katan",
    "Chagigah",
    "Yevamos",
    "Kesubos",
    "Nedarim",
    "Nazir",
    "Sotah",
    "Gitin",
    "Kiddushin",
    "Bava Kamma",
    "Bava Metzia",
    "Bava Basra",
    "Sanhedrin",
    "Makkos",
    "Shevuos",
    "Avodah Zarah",
    "Horiyos",
    "Zevachim",
    "Menachos",
    "Chullin",
    "Bechoros",
    "Arachin",
    "Temurah",
    "Kerisos",
    "Meilah",
    "Kinnim",
    "Tamid",
    "Midos",
    "Niddah",
)

BAVLI_NAMES_HE = (
    "ברכות",
    "שבת",
    "עירובין",
    "פסחים",
    "שקלים",
    "יומא",
    "סוכה",
    "ביצה",
    "ראש השנה",
    "תענית",
    "מגילה",
    "מועד קטן",
    "חגיגה",
    "יבמות",
    "כתובות",
    "נדרים",
    "נזיר",
    "סוטה",
    "גיטין",
    "קידושין",
    "בבא קמא",
    "בבא מציעא",
    "בבא בתרא",
    "סנהדרין",
    "מכות",
    "שבועות",
    "עבודה זרה",
    "הוריות",
    "זבחים",
    "מנחות",
    "חולין",
    "בכורות",
    "ערכין",
    "תמורה",
    "כריתות",
    "מעילה",
    "קינים",
    "תמיד",
    "מידות",
    "נדה",
)

YERUSHALMI_NAMES = (
    "Berachos",
    "Pe'ah",
    "Demai",
    "Kilayim",
    "Shevi'is",
    "Terumos",
    "Ma'asros",
    "Ma'aser Sheni",
    "Chalah",
    "Orlah",
    "Bikurim",
    "Shabbos",
    "Eruvin",
    "Pesachim",
    "Beitzah",
    "Rosh Hashanah",
    "Yoma",
    "Sukah",
    "Ta'anis",
    "Shekalim",
    "Megilah",
    "Chagigah",
    "Moed Katan",
    "Yevamos",
    "Kesuvos",
    "Sotah",
    "Nedarim",
    "Nazir",
    "Gitin",
    "Kidushin",
    "Bava Kama",
    "Bava Metzia",
    "Bava Basra",
    "Shevuos",
    "Makos",
    "Sanhedrin",
    "Avodah Zarah",
    "Horayos",
    "Nidah",
)

YERUSHALMI_NAMES_HE = (
    "ברכות",
    "פיאה",
    "דמאי",
    "כלאיים",
    "שביעית",
    "תרומות",
    "מעשרות",
    "מעשר שני",
    "חלה",
    "עורלה",
    "ביכורים",
    "שבת",
    "עירובין",
    "פסחים",
    "ביצה",
    "ראש השנה",
    "יומא",
    "סוכה",
    "תענית",
    "שקלים",
    "מגילה",
    "חגיגה",
    "מועד קטן",
    "יבמות",
    "כתובות",
    "סוטה",
    "נדרים",
    "נזיר",
    "גיטין",
    "קידושין",
    "בבא קמא",
    "בבא מציעא",
    "בבא בתרא",
    "שבועות",
    "מכות",
    "סנהדרין",
    "עבודה זרה",
    "הוריות",
    "נידה",
)

_NAMES = {
    DafCycle.BAVLI: (BAVLI_NAMES, BAVLI_NAMES_HE),
    DafCycle.YERUSHALMI: (YERUSHALMI_NAMES, YERUSHALMI_NAMES_HE),
}


def tractate_name(cycle: DafCycle, index: int) -> str:
    """Transliterated name of a tractate by its position in the cycle."""
    return _NAMES[cycle][0][index]


def tractate_name_he(cycle: DafCycle, index: int) -> str:
    """Hebrew name of a tractate by its position in the cycle."""
    return _NAMES[cycle][1][index]
