"""
Core math modules

Тарифы и чистые формулы расчёта стоимости отправлений.
"""

from src.core.math.postage import (
    ADVERTISEMENT_RATE_PER_KG,
    EXPRESS_MULTIPLIER,
    GRAMS_PER_KILOGRAM,
    LETTER_A4_BASE_FARE,
    LETTER_FORMAT_A4,
    LETTER_OTHER_BASE_FARE,
    PARCEL_MAX_VOLUME_L,
    PARCEL_RATE_PER_LITER,
    advertisement_postage,
    apply_express,
    grams_to_kilograms,
    is_parcel_volume_allowed,
    letter_base_fare,
    letter_postage,
    parcel_postage,
)

__all__ = [
    # Postage — Constants
    "ADVERTISEMENT_RATE_PER_KG",
    "EXPRESS_MULTIPLIER",
    "GRAMS_PER_KILOGRAM",
    "LETTER_A4_BASE_FARE",
    "LETTER_FORMAT_A4",
    "LETTER_OTHER_BASE_FARE",
    "PARCEL_MAX_VOLUME_L",
    "PARCEL_RATE_PER_LITER",
    # Postage — Functions
    "advertisement_postage",
    "apply_express",
    "grams_to_kilograms",
    "is_parcel_volume_allowed",
    "letter_base_fare",
    "letter_postage",
    "parcel_postage",
]
