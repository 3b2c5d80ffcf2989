"""
Domain models and value objects.

Contains the mail item variants: Letter, Parcel, Advertisement.
"""

from src.core.domain.mail import (
    MAIL_ITEM_TYPES,
    Advertisement,
    Envelope,
    Letter,
    MailItem,
    MailKind,
    Parcel,
    format_quantity,
)

__all__ = [
    # Shared record
    "Envelope",
    "MailKind",
    # Variants
    "Letter",
    "Parcel",
    "Advertisement",
    # Union
    "MailItem",
    "MAIL_ITEM_TYPES",
    # Formatting
    "format_quantity",
]
