"""Точка входа: отчёт по фиксированному набору отправлений.

Запуск:
    python -m src.post
    postal-report
"""

import logging

from src.core.domain.mail import Advertisement, Letter, Parcel
from src.post.box import DEFAULT_BOX_CAPACITY, Box
from src.post.report import emit, format_report


logger = logging.getLogger(__name__)


def build_sample_box() -> Box:
    """Ящик с шестью отправлениями: три допустимых и три недопустимых."""
    box = Box(DEFAULT_BOX_CAPACITY)

    box.add_mail(Letter.create(200, True, "Chemin des Acacias 28, 1009 Pully", "A3"))
    box.add_mail(Letter.create(800, False, "", "A4"))  # нет адреса
    box.add_mail(Advertisement.create(1500, True, "Les Moilles 13A, 1913 Saillon"))
    box.add_mail(Advertisement.create(3000, False, ""))  # нет адреса
    box.add_mail(Parcel.create(5000, True, "Grand rue 18, 1950 Sion", 30))
    box.add_mail(
        Parcel.create(3000, True, "Chemin des fleurs 48, 2800 Delemont", 70)
    )  # объём > 50 л

    return box


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    box = build_sample_box()
    logger.info(
        "Box ready: %d mails, %d invalid", len(box), box.invalid_count()
    )

    emit(format_report(box))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
