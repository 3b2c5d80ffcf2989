"""Box — контейнер почтовых отправлений.

Упорядоченная коллекция отправлений (порядок вставки сохраняется,
дубликаты допускаются, удаления нет):
- total_postage(): сумма стоимости только допустимых отправлений
- invalid_count(): количество недопустимых отправлений
- display(): описание каждого отправления с отметкой о недопустимости

Недопустимые отправления хранятся и отображаются, но не учитываются в сумме.
"""

import logging
import sys
from typing import Final, Iterator, TextIO

from src.core.domain.mail import MAIL_ITEM_TYPES, MailItem


logger = logging.getLogger(__name__)


# Рекомендуемая вместимость ящика (не ограничение)
DEFAULT_BOX_CAPACITY: Final[int] = 30

INVALID_MAIL_MARKER: Final[str] = "(Invalid mail)"


class Box:
    """Почтовый ящик.

    capacity задаёт рекомендательную вместимость: превышение не блокирует
    add_mail(), а только фиксируется предупреждением в логе.
    """

    def __init__(self, capacity: int = DEFAULT_BOX_CAPACITY):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")

        self.capacity = capacity
        self._mails: list[MailItem] = []

    def __len__(self) -> int:
        return len(self._mails)

    def __iter__(self) -> Iterator[MailItem]:
        return iter(self._mails)

    @property
    def items(self) -> tuple[MailItem, ...]:
        """Отправления в порядке вставки (read-only)."""
        return tuple(self._mails)

    def add_mail(self, mail: MailItem) -> None:
        """Добавление отправления в конец ящика.

        Допустимость не проверяется: недопустимые отправления хранятся
        и отфильтровываются только при агрегации.

        Raises:
            TypeError: если mail не является Letter/Parcel/Advertisement
        """
        if not isinstance(mail, MAIL_ITEM_TYPES):
            raise TypeError(
                f"Box accepts Letter, Parcel or Advertisement, got {type(mail).__name__}"
            )

        self._mails.append(mail)
        logger.debug(
            "Added %s to box (%d/%d), valid=%s",
            mail.kind, len(self._mails), self.capacity, mail.is_valid(),
        )

        if len(self._mails) == self.capacity + 1:
            logger.warning(
                "Box capacity hint exceeded: %d items for capacity %d",
                len(self._mails), self.capacity,
            )

    def total_postage(self) -> float:
        """Сумма стоимости допустимых отправлений (в порядке вставки)."""
        total = 0.0
        for mail in self._mails:
            total += mail.calculate_postage() if mail.is_valid() else 0.0
        return total

    def invalid_count(self) -> int:
        """Количество недопустимых отправлений."""
        return sum(1 for mail in self._mails if not mail.is_valid())

    def display(self, stream: TextIO | None = None) -> None:
        """Вывод описаний всех отправлений (по умолчанию в stdout)."""
        out = stream if stream is not None else sys.stdout
        for mail in self._mails:
            mail.display(out)
            if not mail.is_valid():
                print(INVALID_MAIL_MARKER, file=out)
