"""HTML pages: the student landing page and the admin upload form."""

import os
from datetime import date

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ...modules.common.constants import UPLOAD_FIELD_NAME
from ...modules.document.schemas import DocumentType

router = APIRouter(tags=["UI"], include_in_schema=False)

templates_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")

SUBJECTS = {
    "systeme-d-exploitation1": "Système d'Exploitation 1",
    "algorithmes-et-structures-de-donnees": "Algorithmes et Structures de Données",
    "structure-machines": "Structure Machines",
    "systemes-d-information": "Systèmes d'Information",
    "traitement-du-signal": "Traitement du Signal",
    "theorie-des-langages": "Théorie des Langages",
    "analyse-numerique": "Analyse Numérique",
    "psychologie-enfant-adolescent": "Psychologie de l'Enfant et de l'Adolescent",
    "anglais-1": "Anglais 1",
    "les-examens": "Les Examens",
}

TYPE_LABELS = {
    DocumentType.COURS: "Cours",
    DocumentType.TD: "TD",
    DocumentType.TP: "TP",
    DocumentType.EXAM: "Exam",
}

FALLBACK_INDEX = """
<!DOCTYPE html>
<html>
    <head><title>Course Library</title></head>
    <body>
        <h1>index.html not found</h1>
        <p>Place the student interface at <code>interfaces/templates/index.html</code>.</p>
        <p><a href="/admin">Go to Admin Panel</a></p>
    </body>
</html>
"""


def _options(choices: dict) -> str:
    return "\n".join(f'<option value="{value}">{label}</option>' for value, label in choices.items())


def _year_choices() -> dict:
    current = date.today().year
    return {str(year): str(year) for year in range(current, current - 3, -1)}


def render_admin_page() -> str:
    subject_options = _options(SUBJECTS)
    type_options = _options({doc_type.value: label for doc_type, label in TYPE_LABELS.items()})
    year_options = _options(_year_choices())

    return f"""
<!DOCTYPE html>
<html lang="ar" dir="rtl">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>رفع ملفات PDF</title>
  <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-gradient-to-br from-indigo-400 to-purple-600 min-h-screen flex items-center justify-center">
  <div class="max-w-xl w-full bg-white/95 rounded-2xl p-10 shadow-xl">
    <h2 class="text-2xl text-center text-sky-700 mb-8">رفع ملفات PDF للمكتبة</h2>
    <form id="fileForm" method="post" enctype="multipart/form-data" action="/upload" class="space-y-4">
      <label class="block font-semibold">المادة (Subject)</label>
      <select name="subject" required class="w-full border-2 rounded-lg p-3">
        <option value="">اختر المادة</option>
        {subject_options}
      </select>

      <label class="block font-semibold">النوع (Type)</label>
      <select name="type" required class="w-full border-2 rounded-lg p-3">
        <option value="">اختر النوع</option>
        {type_options}
      </select>

      <label class="block font-semibold">السنة (Year)</label>
      <select name="year" required class="w-full border-2 rounded-lg p-3">
        <option value="">اختر السنة</option>
        {year_options}
      </select>

      <label class="block font-semibold">ملفات PDF</label>
      <input type="file" name="{UPLOAD_FIELD_NAME}" accept="application/pdf,.pdf" multiple required
             class="w-full border-2 border-dashed border-sky-700 rounded-lg p-5">

      <button type="submit" class="w-full bg-sky-700 text-white rounded-lg p-4 text-lg font-semibold">رفع الملفات</button>
    </form>

    <div id="msg" class="mt-6"></div>

    <div class="text-center mt-8">
      <a href="/" class="inline-block px-5 py-2 bg-gray-500 text-white rounded-lg">العودة لواجهة الطلاب</a>
    </div>
  </div>

  <script>
    document.getElementById('fileForm').onsubmit = async function (e) {{
      e.preventDefault();
      const form = e.target;
      const msg = document.getElementById('msg');
      msg.innerHTML = '<div class="text-center text-sky-700">جاري الرفع...</div>';
      try {{
        const resp = await fetch('/upload', {{ method: 'POST', body: new FormData(form) }});
        const data = await resp.json();
        if (!data.success) throw new Error(data.error || 'فشل في الرفع');
        msg.innerHTML = '<div class="bg-green-100 text-green-800 rounded-lg p-4 text-center">تم رفع ' + data.files.length + ' ملف بنجاح</div>';
        form.reset();
      }} catch (err) {{
        msg.innerHTML = '<div class="bg-red-100 text-red-800 rounded-lg p-4 text-center"></div>';
        msg.firstChild.textContent = err.message;
      }}
    }};
  </script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
async def get_index():
    """Serve the student interface."""
    index_file = os.path.join(templates_dir, "index.html")
    if os.path.exists(index_file):
        with open(index_file, "r", encoding="utf-8") as f:
            return HTMLResponse(content=f.read())
    return HTMLResponse(content=FALLBACK_INDEX, status_code=404)


@router.get("/admin", response_class=HTMLResponse)
async def get_admin_page():
    """Serve the admin upload form."""
    return HTMLResponse(content=render_admin_page())
