"""Document rendering: text escaping and template substitution."""

from packbuild.render.document import build_document, document_variables
from packbuild.render.escape import escape_text_html
from packbuild.render.template import PLACEHOLDER_PATTERN, evaluate_template

__all__ = [
    "PLACEHOLDER_PATTERN",
    "build_document",
    "document_variables",
    "escape_text_html",
    "evaluate_template",
]
