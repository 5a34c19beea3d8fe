"""Tests for stored filename rules."""

import re

import pytest

from course_library.modules.document.filenames import (
    build_file_url,
    is_pdf_name,
    is_pdf_upload,
    sanitize_filename,
)

STORED_NAME = re.compile(r"[A-Za-z0-9_.-]+")


@pytest.mark.parametrize(
    "original, stored",
    [
        ("lecture1.pdf", "lecture1.pdf"),
        ("Ex:am?.PDF", "Ex_am_.pdf"),
        ("Cours 1 - Intro.Pdf", "Cours_1_-_Intro.pdf"),
        ("notes", "notes.pdf"),
        ("scan.bin", "scan.bin.pdf"),
        ("a   b!!c.pdf", "a_b_c.pdf"),
        ("../../etc/passwd", ".._.._etc_passwd.pdf"),
        ("محاضرة 1.pdf", "_1.pdf"),
        ("résumé.pdf", "r_sum_.pdf"),
    ],
)
def test_sanitize_filename(original: str, stored: str):
    assert sanitize_filename(original) == stored


@pytest.mark.parametrize(
    "original",
    ["Ex:am?.PDF", "مقياس التحليل", "tab\there.pdf", "x.pdf.exe", "日本語.PdF", "with/slash\\back.pdf", "."],
)
def test_sanitized_name_is_safe_and_pdf(original: str):
    """Test that any stored name uses the safe alphabet and ends in .pdf."""
    stored = sanitize_filename(original)

    assert STORED_NAME.fullmatch(stored)
    assert stored.endswith(".pdf")
    assert "/" not in stored and "\\" not in stored


@pytest.mark.parametrize(
    "content_type, name, accepted",
    [
        ("application/pdf", "lecture.pdf", True),
        ("application/pdf", "lecture.bin", True),
        ("Application/PDF; charset=binary", "lecture", True),
        ("application/octet-stream", "lecture.PDF", True),
        (None, "lecture.pdf", True),
        ("image/png", "photo.png", False),
        (None, "notes.docx", False),
        ("text/plain", "pdf", False),
    ],
)
def test_is_pdf_upload(content_type, name, accepted):
    assert is_pdf_upload(content_type, name) is accepted


def test_is_pdf_name_is_case_insensitive():
    assert is_pdf_name("A.PDF")
    assert is_pdf_name("a.pdf")
    assert not is_pdf_name("a.pdf.txt")


def test_build_file_url():
    assert build_file_url("anglais-1", "td", "2024", "serie_1.pdf") == "/files/anglais-1/td/2024/serie_1.pdf"
    assert build_file_url("anglais-1", "td", "2024", "a b.pdf") == "/files/anglais-1/td/2024/a%20b.pdf"


def test_build_file_url_keeps_uri_component_safe_characters():
    """Test that the URL escapes the stored name the way browsers' encodeURIComponent does."""
    assert build_file_url("anglais-1", "td", "2024", "it's (v2)!*.pdf") == "/files/anglais-1/td/2024/it's%20(v2)!*.pdf"
    assert build_file_url("anglais-1", "td", "2024", "a+b&c.pdf") == "/files/anglais-1/td/2024/a%2Bb%26c.pdf"
