"""Strict ``{{variable}}`` template evaluation."""

from __future__ import annotations

import re
from typing import Final, Mapping

from packbuild.errors import UndefinedTemplateVariableError

PLACEHOLDER_PATTERN: Final = re.compile(r"\{\{(\w+)\}\}", re.ASCII)


def evaluate_template(template: str, variables: Mapping[str, str | None]) -> str:
    """Replace every ``{{name}}`` in ``template`` with ``variables[name]``.

    Raises :class:`UndefinedTemplateVariableError` if a referenced name is
    missing or ``None``; nothing is returned in that case. Substituted
    values are not scanned again.
    """

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        value = variables.get(name)
        if value is None:
            raise UndefinedTemplateVariableError(name)
        return value

    return PLACEHOLDER_PATTERN.sub(replace, template)
