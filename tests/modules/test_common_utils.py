"""Tests for error mapping and name collation."""

import pytest

from course_library.modules.common.exceptions import (
    DomainError,
    EmptyUploadError,
    FileTooLargeError,
    ResourceNotFoundError,
    StorageError,
    UnsupportedFormatError,
    ValidationError,
)
from course_library.modules.common.utils.collation import collate
from course_library.modules.common.utils.error_handler import map_exception


@pytest.mark.parametrize(
    "error, status_code",
    [
        (ValidationError("missing year"), 400),
        (UnsupportedFormatError("not a pdf"), 400),
        (FileTooLargeError("big.pdf", 50 * 1024 * 1024), 400),
        (EmptyUploadError("No file was uploaded"), 400),
        (ResourceNotFoundError("gone"), 404),
        (StorageError("disk full"), 500),
        (DomainError("unknown"), 500),
    ],
)
def test_map_exception(error, status_code):
    assert map_exception(error) == status_code


def test_file_too_large_message():
    error = FileTooLargeError("big.pdf", 50 * 1024 * 1024)

    assert str(error) == "File 'big.pdf' exceeds the maximum upload size of 50 MB"


def test_collate_ignores_case():
    assert collate(["b.pdf", "C.pdf", "a.pdf"], key=str) == ["a.pdf", "b.pdf", "C.pdf"]


def test_collate_orders_accented_letters_with_base_letter():
    assert collate(["f.pdf", "é.pdf", "d.pdf"], key=str) == ["d.pdf", "é.pdf", "f.pdf"]


def test_collate_with_key():
    items = [{"name": "2024"}, {"name": "2023"}]

    assert collate(items, key=lambda item: item["name"]) == [{"name": "2023"}, {"name": "2024"}]


def test_collate_puts_arabic_before_latin():
    names = ["Z.pdf", "b.pdf", "ب.pdf", "-x.pdf", "a_b.pdf", "ا.pdf", "_x.pdf", "2024.pdf"]

    assert collate(names, key=str) == ["_x.pdf", "-x.pdf", "2024.pdf", "ا.pdf", "ب.pdf", "a_b.pdf", "b.pdf", "Z.pdf"]


def test_collate_keeps_latin_order_around_arabic():
    names = ["é.pdf", "محاضرة.pdf", "d.pdf", "تمارين.pdf", "f.pdf"]

    assert collate(names, key=str) == ["تمارين.pdf", "محاضرة.pdf", "d.pdf", "é.pdf", "f.pdf"]
