"""
Тесты для текстового отчёта

Проверяет:
1. Денежный формат
2. Описание отправления с отметкой о недопустимости
3. Структуру полного отчёта (итог, отправления, счётчик)
4. Совпадение format_box() с Box.display()
"""

import io

import pytest

from src.core.domain import Advertisement, Letter, Parcel
from src.post import (
    INVALID_MAIL_MARKER,
    Box,
    emit,
    format_box,
    format_item,
    format_price,
    format_report,
)


@pytest.fixture
def mixed_box() -> Box:
    box = Box(10)
    box.add_mail(Letter.create(200, True, "Chemin des Acacias 28, 1009 Pully", "A3"))
    box.add_mail(Advertisement.create(3000, False, ""))
    box.add_mail(Parcel.create(5000, True, "Grand rue 18, 1950 Sion", 30))
    return box


class TestFormatPrice:
    """Тесты денежного формата"""

    @pytest.mark.parametrize(
        "value,expected",
        [(7.4, "$7.40"), (25.0, "$25.00"), (0.0, "$0.00"), (47.4, "$47.40"), (3.999, "$4.00")],
    )
    def test_two_decimals(self, value: float, expected: str) -> None:
        assert format_price(value) == expected


class TestFormatItem:
    """Тесты описания отдельного отправления"""

    def test_valid_item_has_no_marker(self) -> None:
        letter = Letter.create(200, True, "Chemin des Acacias 28, 1009 Pully", "A3")
        assert format_item(letter) == letter.describe()

    def test_invalid_item_has_marker(self) -> None:
        parcel = Parcel.create(3000, True, "Chemin des fleurs 48, 2800 Delemont", 70)
        text = format_item(parcel)
        assert text.endswith("\n" + INVALID_MAIL_MARKER)
        assert text.startswith(parcel.describe())


class TestFormatReport:
    """Тесты полного отчёта"""

    def test_first_and_last_lines(self, mixed_box: Box) -> None:
        lines = format_report(mixed_box).splitlines()
        assert lines[0] == "The total amount of postage is $32.40"
        assert lines[-1] == "The box contains 1 invalid mails"

    def test_items_in_insertion_order(self, mixed_box: Box) -> None:
        report = format_report(mixed_box)
        positions = [report.index(title) for title in ("Letter\n", "Advertisement\n", "Parcel\n")]
        assert positions == sorted(positions)

    def test_body_matches_box_display(self, mixed_box: Box) -> None:
        out = io.StringIO()
        mixed_box.display(out)
        assert format_box(mixed_box) + "\n" == out.getvalue()

    def test_empty_box(self) -> None:
        assert format_report(Box()) == (
            "The total amount of postage is $0.00\n"
            "The box contains 0 invalid mails"
        )


class TestEmit:
    """Тесты вывода"""

    def test_emit_to_stream(self) -> None:
        out = io.StringIO()
        emit("hello", out)
        assert out.getvalue() == "hello\n"

    def test_emit_defaults_to_stdout(self, capsys) -> None:
        emit("hello")
        assert capsys.readouterr().out == "hello\n"
