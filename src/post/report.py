"""Report — текстовый отчёт по почтовому ящику.

Форматирование отделено от вывода: все format_* являются чистыми функциями,
единственная функция с побочным эффектом: emit().

Формат отчёта:
    The total amount of postage is $47.40
    <описание каждого отправления, с отметкой "(Invalid mail)" при необходимости>
    The box contains 3 invalid mails
"""

import sys
from typing import TextIO

from src.core.domain.mail import MailItem
from src.post.box import INVALID_MAIL_MARKER, Box


def format_price(value: float) -> str:
    """Денежный формат с двумя знаками (например, 7.4 → '$7.40')."""
    return f"${value:.2f}"


def format_item(mail: MailItem) -> str:
    """Описание отправления с отметкой о недопустимости."""
    text = mail.describe()
    if not mail.is_valid():
        text = f"{text}\n{INVALID_MAIL_MARKER}"
    return text


def format_box(box: Box) -> str:
    """Описания всех отправлений ящика в порядке вставки."""
    return "\n".join(format_item(mail) for mail in box)


def format_report(box: Box) -> str:
    """
    Полный отчёт: итоговая сумма, отправления, количество недопустимых.

    Args:
        box: Почтовый ящик

    Returns:
        Многострочный текст отчёта (без завершающего перевода строки)
    """
    lines = [f"The total amount of postage is {format_price(box.total_postage())}"]
    if len(box):
        lines.append(format_box(box))
    lines.append(f"The box contains {box.invalid_count()} invalid mails")
    return "\n".join(lines)


def emit(text: str, stream: TextIO | None = None) -> None:
    """Запись текста в поток (по умолчанию stdout)."""
    print(text, file=stream if stream is not None else sys.stdout)
