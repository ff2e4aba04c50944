"""Resolve generator options from the forms callers pass them in.

:func:`resolve_options` is the single place where option input is turned
into a validated :class:`~apitree.models.TreeOptions`. Callers may pass:

* nothing (every option takes its default),
* a :class:`~apitree.models.TreeOptions` instance,
* a plain mapping using snake_case names or the camelCase aliases
  (``folderStrategy``, ``includeWebhooks``, ``includeDeprecated``),

plus keyword overrides. Precedence (high to low):

    1. Keyword overrides
    2. The *options* argument
    3. Defaults

Validation failures are re-raised as :class:`~apitree.exceptions.ConfigError`
so callers only ever have to catch apitree's own exception hierarchy.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from apitree.exceptions import ConfigError
from apitree.models import TreeOptions

OptionsInput = Union[TreeOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsInput = None, **overrides: Any) -> TreeOptions:
    """Return validated :class:`~apitree.models.TreeOptions`.

    Keyword overrides use the snake_case field names and replace whatever
    *options* supplied for the same field. ``None`` overrides are ignored so
    callers can forward optional flags without checking them first.

    Raises:
        ConfigError: If *options* has the wrong type, names an unknown
            option, or holds a value that fails validation (for example a
            folder strategy other than ``paths`` or ``tags``).

    Example::

        resolve_options({"folderStrategy": "tags"}, include_webhooks=True)
        # TreeOptions(folder_strategy=<FolderStrategy.TAGS: 'tags'>, include_webhooks=True, ...)
    """
    if options is None:
        data: dict[str, Any] = {}
    elif isinstance(options, TreeOptions):
        data = options.model_dump()
    elif isinstance(options, Mapping):
        data = _normalize_keys(options)
    else:
        raise ConfigError(
            f"Options must be a TreeOptions instance or a mapping, not {type(options).__name__}"
        )

    data.update({name: value for name, value in overrides.items() if value is not None})

    try:
        return TreeOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid tree options: {_summarize(exc)}") from exc


def _normalize_keys(options: Mapping[str, Any]) -> dict[str, Any]:
    """Rewrite camelCase alias keys to field names so overrides can replace them."""
    by_alias = {
        field.alias: name
        for name, field in TreeOptions.model_fields.items()
        if field.alias is not None
    }
    return {by_alias.get(key, key): value for key, value in options.items()}


def _summarize(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(loc) for loc in err["loc"]) or "options"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def describe_options(options: Optional[TreeOptions] = None) -> dict[str, Any]:
    """Return *options* (or the defaults) as a plain dict using the camelCase aliases."""
    return (options or TreeOptions()).model_dump(mode="json", by_alias=True)
