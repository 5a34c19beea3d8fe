"""Static file server for stored documents."""

import os

from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from ..modules.common.constants import PDF_MEDIA_TYPE
from ..modules.document.filenames import is_pdf_name


class DocumentFiles(StaticFiles):
    """Serves the storage tree, with PDFs opened inline by the browser."""

    def file_response(
        self,
        full_path: "str | os.PathLike[str]",
        stat_result: os.stat_result,
        scope: Scope,
        status_code: int = 200,
    ) -> Response:
        response = super().file_response(full_path, stat_result, scope, status_code)
        if is_pdf_name(os.fspath(full_path)):
            response.headers["Content-Type"] = PDF_MEDIA_TYPE
            response.headers["Content-Disposition"] = "inline"
        return response
