"""String helpers for naming collection items and rewriting URL variables.

These are used when a tree is rendered for people (:mod:`apitree.output`)
and by stages that turn request nodes into concrete requests, which need
the same naming rules to agree with each other.
"""

from __future__ import annotations

import re
from typing import Any

DEFAULT_COLLECTION_NAME = "Imported from OpenAPI"

MAX_REQUEST_NAME_LENGTH = 255

_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
_UNDERSCORES = re.compile(r"(_+)([a-zA-Z0-9])")

# A whole segment that is a single {var}, e.g. /{petId} but not /{file}.{format}
_SCHEMA_PATH_VARIABLE = re.compile(r"/\{[^/{}]+\}(?=/|$)")
_PATH_VARIABLE = re.compile(r"/\{\{[^/{}]+\}\}(?=/|$)")
_COLLECTION_VARIABLE = re.compile(r"\{\{[^/{}]+\}\}")
_SINGLE_BRACE_VARIABLE = re.compile(r"\{[^/{}]+\}")


def insert_spaces_in_name(value: Any) -> str:
    """Turn a camelCase or snake_case identifier into space-separated words.

    Example::

        >>> insert_spaces_in_name("createUser")
        'create User'
        >>> insert_spaces_in_name("NASAMission")
        'NASA Mission'
        >>> insert_spaces_in_name("create_user")
        'create user'
    """
    if not value or not isinstance(value, str):
        return ""
    value = _LOWER_UPPER.sub(r"\1 \2", value)
    value = _ACRONYM_WORD.sub(r"\1 \2", value)
    return _UNDERSCORES.sub(r" \2", value)


def trim_request_name(value: Any) -> Any:
    """Truncate string names to 255 characters; other values pass through."""
    if isinstance(value, str):
        return value[:MAX_REQUEST_NAME_LENGTH]
    return value


def find_path_variables_from_schema_path(path: str) -> list[str]:
    """Names of ``{var}`` placeholders that make up a whole path segment.

    Example::

        >>> find_path_variables_from_schema_path("/{path}/{file}.{format}/{hello}")
        ['path', 'hello']
    """
    return [match[2:-1] for match in _SCHEMA_PATH_VARIABLE.findall(path)]


def find_path_variables_from_path(path: str) -> list[str]:
    """Whole-segment ``/{{var}}`` matches, slash included.

    Example::

        >>> find_path_variables_from_path("/{{path}}/{{file}}.{{format}}/{{hello}}")
        ['/{{path}}', '/{{hello}}']
    """
    return _PATH_VARIABLE.findall(path)


def find_collection_variables_from_path(path: str) -> list[str]:
    """Every ``{{var}}`` in *path*, wherever it appears."""
    return _COLLECTION_VARIABLE.findall(path)


def fix_path_variable_name(path: str) -> str:
    """Build a collection-variable name from a path.

    Example::

        >>> fix_path_variable_name("item/{itemId}")
        'item-itemId-Url'
    """
    return re.sub(r"[{}]", "", path.replace("/", "-")) + "-Url"


def fix_path_variables_in_url(url: Any) -> str:
    """Rewrite ``{var}`` placeholders as ``{{var}}``.

    Placeholders already written as ``{{var}}`` are left alone. Non-string
    input yields an empty string.

    Example::

        >>> fix_path_variables_in_url("{scheme}://api.example.com/{{version}}/pets/{id}")
        '{{scheme}}://api.example.com/{{version}}/pets/{{id}}'
    """
    if not isinstance(url, str):
        return ""

    def _replace(match: re.Match[str]) -> str:
        start, end = match.span()
        if start > 0 and url[start - 1] == "{" and url[end:end + 1] == "}":
            return match.group(0)
        return "{" + match.group(0) + "}"

    return _SINGLE_BRACE_VARIABLE.sub(_replace, url)


def get_collection_name(title: Any) -> str:
    """Return *title*, or the default collection name if it is empty or not a string."""
    if not title or not isinstance(title, str):
        return DEFAULT_COLLECTION_NAME
    return title
