"""
Mail — Модели почтовых отправлений

Immutable Pydantic модели для трёх видов отправлений:
- Letter (письмо, с форматом)
- Parcel (посылка, с объёмом)
- Advertisement (рекламная рассылка)

Общие атрибуты (вес, экспресс, адрес) вынесены в запись Envelope,
которую каждое отправление содержит как поле. Допустимость отправления
вычисляется на лету и не хранится: базовое правило Envelope.is_valid()
дополняется правилами конкретного вида через логическое И.
"""

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Annotated, Literal, TextIO, Union

from pydantic import BaseModel, Field

from src.core.math.postage import (
    advertisement_postage,
    is_parcel_volume_allowed,
    letter_postage,
    parcel_postage,
)


# =============================================================================
# ENUMS
# =============================================================================


class MailKind(str, Enum):
    """Вид отправления"""

    LETTER = "letter"
    PARCEL = "parcel"
    ADVERTISEMENT = "advertisement"

    @property
    def title(self) -> str:
        """Заголовок вида в отчёте (например, 'Letter')"""
        return self.value.capitalize()


# =============================================================================
# FORMATTING
# =============================================================================


def format_quantity(value: float) -> str:
    """
    Вес или объём для отчёта без потери точности.

    Целые значения печатаются без дробной части, остальные через repr().

    Examples:
        >>> format_quantity(1234567.0)
        '1234567'
        >>> format_quantity(50.00001)
        '50.00001'
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


# =============================================================================
# ENVELOPE
# =============================================================================


class Envelope(BaseModel):
    """
    Общие атрибуты любого отправления.

    Значения не валидируются на диапазон: отрицательный вес или пустой адрес
    допустимы при создании и учитываются только через is_valid().
    """

    weight: float = Field(..., description="Вес в граммах")
    express: bool = Field(False, description="Экспресс-доставка")
    destination: str = Field("", description="Адрес доставки (может быть пустым)")

    model_config = {"frozen": True}  # Immutable

    def is_valid(self) -> bool:
        """Базовое правило: адрес доставки не пустой."""
        return bool(self.destination)


# =============================================================================
# MAIL ITEMS
# =============================================================================


class _Mail(BaseModel, ABC):
    """
    Абстрактная общая часть всех отправлений: Envelope и доступ к его полям.

    Конкретные виды добавляют поле kind (дискриминатор), свои атрибуты
    и формулу calculate_postage().
    """

    envelope: Envelope

    model_config = {"frozen": True}  # Immutable

    @property
    def weight(self) -> float:
        return self.envelope.weight

    @property
    def express(self) -> bool:
        return self.envelope.express

    @property
    def destination(self) -> str:
        return self.envelope.destination

    @abstractmethod
    def calculate_postage(self) -> float:
        """Стоимость отправления в USD."""

    def is_valid(self) -> bool:
        return self.envelope.is_valid()

    def _extra_lines(self) -> list[str]:
        """Строки описания, специфичные для вида отправления."""
        return []

    def describe(self) -> str:
        """
        Многострочное описание отправления для отчёта.

        Returns:
            Текст вида:
                Letter
                Weight: 200 grams
                Express: yes
                Destination: ...
                Price: $7.40
                Format: A3
        """
        lines = [
            MailKind(self.kind).title,  # type: ignore[attr-defined]
            f"Weight: {format_quantity(self.weight)} grams",
            f"Express: {'yes' if self.express else 'no'}",
            f"Destination: {self.destination}",
            f"Price: ${self.calculate_postage():.2f}",
        ]
        lines.extend(self._extra_lines())
        return "\n".join(lines)

    def display(self, stream: TextIO | None = None) -> None:
        """Вывод описания в поток (по умолчанию stdout)."""
        print(self.describe(), file=stream if stream is not None else sys.stdout)


class Letter(_Mail):
    """Письмо. Формат "A4" тарифицируется дешевле любого другого."""

    kind: Literal["letter"] = "letter"
    format: str = Field(..., description="Формат письма ('A4' или другой)")

    @classmethod
    def create(
        cls, weight: float, express: bool, destination: str, format: str
    ) -> "Letter":
        """Создание письма из плоского списка атрибутов."""
        return cls(
            envelope=Envelope(weight=weight, express=express, destination=destination),
            format=format,
        )

    def calculate_postage(self) -> float:
        return letter_postage(self.weight, self.express, self.format)

    def _extra_lines(self) -> list[str]:
        return [f"Format: {self.format}"]


class Parcel(_Mail):
    """Посылка. Допустима только при объёме не более 50 литров."""

    kind: Literal["parcel"] = "parcel"
    volume: float = Field(..., description="Объём в литрах")

    @classmethod
    def create(
        cls, weight: float, express: bool, destination: str, volume: float
    ) -> "Parcel":
        """Создание посылки из плоского списка атрибутов."""
        return cls(
            envelope=Envelope(weight=weight, express=express, destination=destination),
            volume=volume,
        )

    def calculate_postage(self) -> float:
        return parcel_postage(self.weight, self.express, self.volume)

    def is_valid(self) -> bool:
        """Базовое правило И ограничение объёма."""
        return super().is_valid() and is_parcel_volume_allowed(self.volume)

    def _extra_lines(self) -> list[str]:
        return [f"Volume: {format_quantity(self.volume)} liters"]


class Advertisement(_Mail):
    """Рекламная рассылка (без дополнительных атрибутов)."""

    kind: Literal["advertisement"] = "advertisement"

    @classmethod
    def create(cls, weight: float, express: bool, destination: str) -> "Advertisement":
        """Создание рекламной рассылки из плоского списка атрибутов."""
        return cls(
            envelope=Envelope(weight=weight, express=express, destination=destination)
        )

    def calculate_postage(self) -> float:
        return advertisement_postage(self.weight, self.express)


# Закрытое множество видов отправлений (tagged union по полю kind)
MailItem = Annotated[Union[Letter, Parcel, Advertisement], Field(discriminator="kind")]

MAIL_ITEM_TYPES: tuple[type, ...] = (Letter, Parcel, Advertisement)
