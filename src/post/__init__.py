"""
Post — почтовый ящик и отчёт по нему.

Box хранит отправления и считает итоговую стоимость,
report форматирует текстовый отчёт.
"""

from .box import DEFAULT_BOX_CAPACITY, INVALID_MAIL_MARKER, Box
from .report import emit, format_box, format_item, format_price, format_report

__all__ = [
    # Box
    "Box",
    "DEFAULT_BOX_CAPACITY",
    "INVALID_MAIL_MARKER",
    # Report
    "emit",
    "format_box",
    "format_item",
    "format_price",
    "format_report",
]
