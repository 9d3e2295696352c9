"""Daf Yomi cycle calculators."""

from .bavli import get_bavli_daf
from .tractates import tractate_name, tractate_name_he
from .yerushalmi import get_yerushalmi_daf

__all__ = [
    "get_bavli_daf",
    "get_yerushalmi_daf",
    "tractate_name",
    "tractate_name_he",
]
