"""Operation filtering shared by every tree builder.

The path strategy, the tag strategy and the webhook augmenter all decide
whether an operation becomes a request node with the same two rules:

* the key must be an HTTP method (path items only; webhooks accept any key),
* deprecated operations are dropped unless ``include_deprecated`` is set.

Both rules live here so the three builders cannot drift apart.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping

from apitree.models import HTTPMethod

logger = logging.getLogger(__name__)

ALLOWED_HTTP_METHODS = frozenset(m.value for m in HTTPMethod)


def is_allowed_method(method: str) -> bool:
    """Return ``True`` if *method* is an HTTP method key (case-sensitive)."""
    return method in ALLOWED_HTTP_METHODS


def should_include(operation: Mapping[str, Any], include_deprecated: bool) -> bool:
    """Return ``True`` unless *operation* is deprecated and deprecated ones are excluded."""
    return include_deprecated or not operation.get("deprecated", False)


def iter_operations(
    path_item: Any,
    include_deprecated: bool,
    *,
    allowed_only: bool = True,
) -> Iterator[tuple[str, Mapping[str, Any]]]:
    """Yield ``(method, operation)`` pairs of *path_item* that should become nodes.

    Pairs come out in the order the path item declares them. Keys that are
    not HTTP methods (``parameters``, ``summary``, ``servers``, ...) are
    skipped when *allowed_only* is true, and so is any value that is not a
    mapping.

    Args:
        path_item: Mapping of method name to operation object.
        include_deprecated: Keep operations flagged ``deprecated: true``.
        allowed_only: Restrict keys to :data:`ALLOWED_HTTP_METHODS`. The
            webhook augmenter passes ``False``.
    """
    if not isinstance(path_item, Mapping):
        return

    for method, operation in path_item.items():
        if allowed_only and not is_allowed_method(method):
            continue
        if not isinstance(operation, Mapping):
            continue
        if not should_include(operation, include_deprecated):
            logger.debug("Skipping deprecated operation %s", method)
            continue
        yield method, operation
