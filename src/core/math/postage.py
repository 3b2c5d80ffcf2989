"""
Postage — тарифы и формулы расчёта стоимости отправлений

Все формулы являются чистыми функциями над числовыми параметрами:
- вес задаётся в граммах и переводится в килограммы (w / 1000)
- экспресс-доставка удваивает итоговую стоимость

Формулы тотальны: отрицательный вес, отрицательный объём и неизвестный
формат письма не отклоняются, формула применяется как есть.
Допустимость отправления проверяется отдельно (src.core.domain.mail).
"""

from typing import Final


# =============================================================================
# ТАРИФЫ
# =============================================================================

# Формат письма с пониженным базовым тарифом
LETTER_FORMAT_A4: Final[str] = "A4"

# Базовый тариф письма (USD)
LETTER_A4_BASE_FARE: Final[float] = 2.50
LETTER_OTHER_BASE_FARE: Final[float] = 3.50

# Тариф посылки за литр объёма (USD)
PARCEL_RATE_PER_LITER: Final[float] = 0.25

# Тариф рекламной рассылки за килограмм (USD)
ADVERTISEMENT_RATE_PER_KG: Final[float] = 5.0

# Множитель экспресс-доставки
EXPRESS_MULTIPLIER: Final[float] = 2.0

GRAMS_PER_KILOGRAM: Final[float] = 1000.0

# Максимальный допустимый объём посылки (литры, включительно)
PARCEL_MAX_VOLUME_L: Final[float] = 50.0


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def grams_to_kilograms(weight_g: float) -> float:
    """
    Конверсия граммов в килограммы.

    Args:
        weight_g: Вес в граммах

    Returns:
        Вес в килограммах (например, 200 g → 0.2 kg)
    """
    return weight_g / GRAMS_PER_KILOGRAM


def apply_express(postage: float, express: bool) -> float:
    """Удвоение стоимости для экспресс-отправлений."""
    return EXPRESS_MULTIPLIER * postage if express else postage


# =============================================================================
# ФОРМУЛЫ ПО ТИПАМ ОТПРАВЛЕНИЙ
# =============================================================================


def letter_base_fare(letter_format: str) -> float:
    """
    Базовый тариф письма по формату.

    Любой формат, кроме "A4", тарифицируется по более высокому тарифу.
    """
    if letter_format == LETTER_FORMAT_A4:
        return LETTER_A4_BASE_FARE
    return LETTER_OTHER_BASE_FARE


def letter_postage(weight_g: float, express: bool, letter_format: str) -> float:
    """
    Стоимость письма.

    Формула:
        (base_fare(format) + w/1000) * (2 if express else 1)

    Args:
        weight_g: Вес в граммах
        express: Экспресс-доставка
        letter_format: Формат письма ("A4" или другой)

    Returns:
        Стоимость в USD

    Examples:
        >>> letter_postage(200, True, "A3")
        7.4
    """
    postage = letter_base_fare(letter_format) + grams_to_kilograms(weight_g)
    return apply_express(postage, express)


def parcel_postage(weight_g: float, express: bool, volume_l: float) -> float:
    """
    Стоимость посылки.

    Формула:
        (0.25 * volume + w/1000) * (2 if express else 1)

    Args:
        weight_g: Вес в граммах
        express: Экспресс-доставка
        volume_l: Объём в литрах

    Returns:
        Стоимость в USD
    """
    postage = PARCEL_RATE_PER_LITER * volume_l + grams_to_kilograms(weight_g)
    return apply_express(postage, express)


def advertisement_postage(weight_g: float, express: bool) -> float:
    """
    Стоимость рекламной рассылки.

    Формула:
        5.0 * w/1000 * (2 if express else 1)
    """
    postage = ADVERTISEMENT_RATE_PER_KG * grams_to_kilograms(weight_g)
    return apply_express(postage, express)


def is_parcel_volume_allowed(volume_l: float) -> bool:
    """Объём посылки не превышает PARCEL_MAX_VOLUME_L (граница включительно)."""
    return volume_l <= PARCEL_MAX_VOLUME_L
