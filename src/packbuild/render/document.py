"""Assemble the output document around the packed code."""

from __future__ import annotations

import json

from packbuild.render.escape import escape_text_html
from packbuild.render.template import evaluate_template


def document_variables(title: str, code: str) -> dict[str, str]:
    """Variable set for the document template."""

    return {
        "title_html": escape_text_html(title),
        "title_js": json.dumps(title, ensure_ascii=False),
        "code": code,
    }


def build_document(template: str, *, title: str, code: str) -> str:
    """Evaluate the document template with the title and packed code."""

    return evaluate_template(template, document_variables(title, code))
