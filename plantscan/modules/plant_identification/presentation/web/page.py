# 📄 File: plantscan/modules/plant_identification/presentation/web/page.py
# 🧭 Purpose (Layman Explanation):
# Draws the scan screen as a web page, right-to-left, in Hebrew or Arabic, with the
# photo, the list of matches, the care guide and any error message.
# 🧪 Purpose (Technical Summary):
# Server-side HTML rendering of a ScanView snapshot. All service-supplied text is
# escaped. A small inline script drives the JSON endpoints and reloads the page.
# 🔗 Dependencies:
# FastAPI HTMLResponse, html (escaping), scan_view DTOs
# 🔄 Connected Modules / Calls From:
# plantscan.main (GET /)

from html import escape

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from plantscan.modules.plant_identification.application.dto import ScanView
from plantscan.modules.plant_identification.application.scan_controller import ScanController
from plantscan.modules.plant_identification.presentation.dependencies import get_scan_controller

page_router = APIRouter()

API_BASE = "/api/v1/scan"

_SCRIPT = """
async function call(method, path, body) {
  const res = await fetch('%(base)s' + path, {method: method, body: body,
    headers: body && !(body instanceof FormData) ? {'Content-Type': 'application/json'} : {}});
  if (!res.ok) { const err = await res.json(); alert(err.error ? err.error.message : res.status); }
  location.reload();
}
function upload(input) {
  if (!input.files.length) return;
  const form = new FormData(); form.append('file', input.files[0]);
  call('POST', '/image', form);
}
""" % {"base": API_BASE}


def _upload_section(view: ScanView) -> str:
    labels = view.labels
    parts = [
        '<section class="upload">',
        f'<label>{escape(labels["uploadLabel"])} '
        '<input type="file" accept="image/*" capture="environment" onchange="upload(this)"></label>',
    ]
    if view.upload.preview_url:
        parts.append(f'<img class="preview" alt="" src="{escape(view.upload.preview_url)}">')
    disabled = "" if view.upload.can_identify else " disabled"
    parts.append(f'<button onclick="call(\'POST\', \'/identify\')"{disabled}>{escape(labels["identify"])}</button>')
    if view.upload.has_image or view.results:
        parts.append(f'<button onclick="call(\'POST\', \'/reset\')">{escape(labels["pickAnother"])}</button>')
    if view.loading:
        parts.append(f'<p class="loading">{escape(labels["loading"])}</p>')
    parts.append("</section>")
    return "\n".join(parts)


def _results_section(view: ScanView) -> str:
    if view.no_matches:
        return f'<p class="no-matches">{escape(view.labels["noMatches"])}</p>'
    if view.results is None:
        return ""

    items = []
    for item in view.results.items:
        css = ' class="selected"' if item.selected else ""
        items.append(
            f'<li{css}><button onclick="call(\'POST\', \'/suggestions/{item.index}/select\')">'
            f'<i>{escape(item.scientific_name)}</i> &ndash; {item.probability_percent}%</button></li>'
        )
    return (
        f'<section class="results"><h2>{escape(view.labels["results"])}</h2>'
        f'<ul>{"".join(items)}</ul></section>'
    )


def _care_section(view: ScanView) -> str:
    care = view.care
    if care is None:
        return ""

    labels = view.labels
    rows = [
        f'<dt>{escape(labels["watering"])}</dt><dd>{escape(care.watering or "-")}</dd>',
        f'<dt>{escape(labels["sunlight"])}</dt><dd>{escape(", ".join(care.sunlight) or "-")}</dd>',
    ]
    rows.extend(f'<dt>{escape(row.label)}</dt><dd>{escape(row.value)}</dd>' for row in care.rows)

    html = [
        f'<section class="care"><h2>{escape(labels["careGuide"])}: <i>{escape(care.scientific_name)}</i></h2>',
        f'<dl>{"".join(rows)}</dl>',
    ]
    if care.extract:
        html.append(f'<h3>{escape(labels["description"])}</h3><p>{escape(care.extract)}</p>')
    html.append("</section>")
    return "\n".join(html)


def _error_section(view: ScanView) -> str:
    if view.error is None:
        return ""
    return f'<p class="error" role="alert">{escape(view.error.message)}</p>'


def _locale_switch(view: ScanView) -> str:
    labels = view.labels
    options = []
    for code, key in (("he", "hebrew"), ("ar", "arabic")):
        selected = " selected" if code == view.lang else ""
        options.append(f'<option value="{code}"{selected}>{escape(labels[key])}</option>')
    return (
        f'<label>{escape(labels["language"])} '
        '<select onchange="call(\'PUT\', \'/locale\', JSON.stringify({lang: this.value}))">'
        f'{"".join(options)}</select></label>'
    )


def render_page(view: ScanView) -> str:
    """Render a full HTML document for ``view``."""
    title = escape(view.labels["appTitle"])
    body = "\n".join(
        section for section in (
            f"<header><h1>{title}</h1>{_locale_switch(view)}</header>",
            _upload_section(view),
            _error_section(view),
            _results_section(view),
            _care_section(view),
        ) if section
    )
    return (
        "<!DOCTYPE html>\n"
        f'<html lang="{escape(view.lang)}" dir="{escape(view.dir)}">\n'
        f'<head><meta charset="utf-8"><meta name="viewport" content="width=device-width, initial-scale=1">'
        f"<title>{title}</title></head>\n"
        f"<body>\n{body}\n<script>{_SCRIPT}</script>\n</body>\n</html>\n"
    )


@page_router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def scan_page(controller: ScanController = Depends(get_scan_controller)) -> HTMLResponse:
    return HTMLResponse(render_page(controller.render()))
