"""Build the skeleton collection tree for an API specification.

This is the entry point of apitree. It picks exactly one base strategy from
the options, runs it, and then -- when asked to -- adds the webhook folder
to the same tree:

1. Resolve and validate options. An unknown folder strategy fails here,
   before any node exists.
2. ``paths`` -> :func:`~apitree.generator.paths.build_tree_from_paths`;
   ``tags`` -> :func:`~apitree.generator.tags.build_tree_from_tags`.
3. ``include_webhooks`` -> :func:`~apitree.generator.webhooks.add_webhook_endpoints`.

The result only says *where* each request belongs. Turning request nodes
into concrete requests (parameters, bodies, auth, examples) is left to the
stage that consumes the tree.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from apitree.config import OptionsInput, describe_options, resolve_options
from apitree.exceptions import SpecShapeError
from apitree.generator.paths import build_tree_from_paths
from apitree.generator.tags import build_tree_from_tags
from apitree.generator.webhooks import add_webhook_endpoints
from apitree.models import FolderStrategy
from apitree.tree import CollectionTree

logger = logging.getLogger(__name__)


def generate_skeleton_tree(
    spec: Mapping[str, Any],
    options: OptionsInput = None,
    **overrides: Any,
) -> CollectionTree:
    """Generate the folder/request tree for *spec*.

    Args:
        spec: A parsed (``$ref``-resolved or not) OpenAPI document as a
            mapping. Only ``paths``, ``tags`` and ``webhooks`` are read.
        options: A :class:`~apitree.models.TreeOptions`, a mapping of
            options (snake_case or camelCase keys), or ``None`` for defaults.
        **overrides: Individual options by field name (``folder_strategy``,
            ``include_webhooks``, ``include_deprecated``); these win over
            *options*.

    Returns:
        The completed :class:`~apitree.tree.CollectionTree`.

    Raises:
        ConfigError: If the options are invalid, including an unknown
            folder strategy.
        SpecShapeError: If *spec* is not a mapping or its ``paths`` entry is
            missing or not a mapping.

    Example::

        tree = generate_skeleton_tree(
            openapi,
            {"folderStrategy": "tags", "includeWebhooks": True},
        )
        for depth, node in tree.walk():
            print("  " * depth + str(node.key))
    """
    opts = resolve_options(options, **overrides)
    paths = _require_paths(spec)
    logger.debug("Generating skeleton tree with %s", describe_options(opts))

    if opts.folder_strategy == FolderStrategy.TAGS:
        tree = build_tree_from_tags(
            paths,
            spec.get("tags"),
            include_deprecated=opts.include_deprecated,
        )
    else:
        tree = build_tree_from_paths(paths, include_deprecated=opts.include_deprecated)

    if opts.include_webhooks:
        add_webhook_endpoints(
            tree,
            spec.get("webhooks"),
            include_deprecated=opts.include_deprecated,
        )

    logger.debug("Generated %r", tree)
    return tree


def _require_paths(spec: Any) -> Mapping[str, Any]:
    if not isinstance(spec, Mapping):
        raise SpecShapeError(
            f"Specification must be a mapping, not {type(spec).__name__}"
        )
    paths = spec.get("paths")
    if not isinstance(paths, Mapping):
        raise SpecShapeError(
            "Specification has no 'paths' mapping; pass at least an empty one"
        )
    return paths
