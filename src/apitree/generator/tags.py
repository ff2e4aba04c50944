"""Group requests into one folder per tag.

Every declared tag gets a folder directly under the root, even when no
operation uses it. An operation is then filed under *each* of its tags: an
operation tagged ``["Pet", "Store"]`` yields two independent request nodes,
one per folder. Operations without tags hang directly off the root.

Tags referenced by an operation but missing from the top-level ``tags``
list get a folder on first use. Those folders are appended after the
declared ones, in the order operations first reference them.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from apitree.generator.filters import iter_operations
from apitree.models import (
    ROOT_KEY,
    NodeKey,
    TagFolderMeta,
    TagRequestMeta,
    TreeNode,
    UntaggedRequestMeta,
)
from apitree.tree import CollectionTree

logger = logging.getLogger(__name__)


def build_tree_from_tags(
    paths: Mapping[str, Any],
    tags: Optional[Sequence[Mapping[str, Any]]] = None,
    *,
    include_deprecated: bool = False,
) -> CollectionTree:
    """Build a tree with one folder per tag.

    Args:
        paths: The specification's ``paths`` mapping, in declaration order.
        tags: The specification's top-level ``tags`` list of
            ``{"name": ..., "description": ...}`` objects. ``None`` is
            treated as empty.
        include_deprecated: Keep operations flagged ``deprecated: true``.

    Returns:
        A :class:`~apitree.tree.CollectionTree`.
    """
    tree = CollectionTree()
    descriptions = tag_descriptions(tags)

    for tag, description in descriptions.items():
        _add_tag_folder(tree, tag, description=description)

    for path, path_item in (paths or {}).items():
        for method, operation in iter_operations(path_item, include_deprecated):
            op_tags = operation.get("tags") or []

            if not op_tags:
                request_key = NodeKey.untagged_request(path, method)
                tree.set_node(
                    TreeNode(
                        key=request_key,
                        meta=UntaggedRequestMeta(path=path, method=method),
                    )
                )
                tree.set_edge(ROOT_KEY, request_key)
                continue

            for tag in op_tags:
                tag = str(tag)
                request_key = NodeKey.tag_request(tag, path, method)
                tree.set_node(
                    TreeNode(
                        key=request_key,
                        meta=TagRequestMeta(tag=tag, path=path, method=method),
                    )
                )

                folder_key = NodeKey.tag_folder(tag)
                if not tree.has_node(folder_key):
                    logger.debug("Tag %r is not declared; creating its folder from %s", tag, path)
                    _add_tag_folder(tree, tag, description=None, path=path)

                tree.set_edge(folder_key, request_key)

    return tree


def tag_descriptions(tags: Optional[Sequence[Mapping[str, Any]]]) -> dict[str, Optional[str]]:
    """Map each declared tag name to its description, in declaration order.

    The first declaration of a name wins. Entries without a ``name`` are
    ignored.

    Example::

        >>> tag_descriptions([{"name": "Pet", "description": "Pets"}, {"name": "Pet"}])
        {'Pet': 'Pets'}
    """
    result: dict[str, Optional[str]] = {}
    for tag in tags or []:
        if not isinstance(tag, Mapping) or tag.get("name") is None:
            continue
        name = str(tag["name"])
        if name not in result:
            result[name] = tag.get("description")
    return result


def _add_tag_folder(
    tree: CollectionTree,
    tag: str,
    *,
    description: Optional[str],
    path: str = "",
) -> None:
    key = NodeKey.tag_folder(tag)
    if tree.has_node(key):
        return
    tree.set_node(
        TreeNode(key=key, meta=TagFolderMeta(name=tag, description=description, path=path))
    )
    tree.set_edge(ROOT_KEY, key)
