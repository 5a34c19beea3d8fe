"""Stored filename rules shared by uploads and listings."""

import re
from urllib.parse import quote

from ..common.constants import PDF_MEDIA_TYPE, PDF_SUFFIX

_UNSAFE_RUN = re.compile(r"[^\w\-.]+", re.ASCII)
# Characters encodeURIComponent leaves unescaped besides letters, digits and "-_.~".
_URL_SAFE = "!'()*"


def sanitize_filename(original_name: str) -> str:
    """Derive the stored filename from an uploader-supplied name.

    Every run of characters other than ASCII word characters, hyphens and
    dots collapses to a single underscore, and the name is forced to end in
    a lowercase ``.pdf``.

    >>> sanitize_filename("Ex:am?.PDF")
    'Ex_am_.pdf'
    >>> sanitize_filename("notes de cours")
    'notes_de_cours.pdf'
    """
    name = _UNSAFE_RUN.sub("_", original_name)
    if name.lower().endswith(PDF_SUFFIX):
        return name[: -len(PDF_SUFFIX)] + PDF_SUFFIX
    return name + PDF_SUFFIX


def is_pdf_name(name: str) -> bool:
    return name.lower().endswith(PDF_SUFFIX)


def is_pdf_upload(content_type: str | None, original_name: str) -> bool:
    """Whether an upload part passes the content-type gate.

    A part is accepted when it declares ``application/pdf`` or its original
    filename carries a ``.pdf`` suffix.
    """
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    return media_type == PDF_MEDIA_TYPE or is_pdf_name(original_name)


def build_file_url(subject: str, document_type: str, year: str, stored_name: str) -> str:
    """Retrieval URL of a stored document under the ``/files`` mount."""
    return f"/files/{subject}/{document_type}/{year}/{quote(stored_name, safe=_URL_SAFE)}"
