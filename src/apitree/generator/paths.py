"""Group requests into folders by URL path segment.

Each path is split into segments and one folder is created per unique
segment prefix, so ``/user`` and ``/user/{id}`` share a single ``user``
folder and ``/user/{id}`` adds a nested ``{id}`` folder underneath it::

    root:collection
    +-- path:folder:user
        +-- path:request:user:get
        +-- path:folder:user/{id}
            +-- path:request:user/{id}:get

Folders are keyed by their *path identifier* (the ``/``-joined segments up
to and including their own), which is what makes creation idempotent: the
first path to reach a prefix creates the folder and every later path reuses
it.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from apitree.generator.filters import iter_operations
from apitree.models import ROOT_KEY, NodeKey, PathFolderMeta, PathRequestMeta, TreeNode
from apitree.tree import CollectionTree

logger = logging.getLogger(__name__)


def build_tree_from_paths(
    paths: Mapping[str, Any],
    *,
    include_deprecated: bool = False,
) -> CollectionTree:
    """Build a tree whose folders mirror the URL path hierarchy.

    Args:
        paths: The specification's ``paths`` mapping (path -> method ->
            operation), in declaration order.
        include_deprecated: Keep operations flagged ``deprecated: true``.

    Returns:
        A :class:`~apitree.tree.CollectionTree`. With no paths it holds only
        the root node.

    Example::

        tree = build_tree_from_paths({"/user": {"get": {}}})
        [str(n.key) for n in tree.nodes()]
        # ['root:collection', 'path:folder:user', 'path:request:user:get']
    """
    tree = CollectionTree()

    if not paths:
        return tree

    for full_path, path_item in paths.items():
        segments = split_path(full_path)
        if not segments:
            logger.debug("Path %r has no segments, skipping", full_path)
            continue

        # Intermediate folders exist whether or not the final segment ends up
        # holding any request.
        for index in range(len(segments) - 1):
            _ensure_folder(tree, segments, index)

        last = len(segments) - 1
        path_identifier = _join(segments[: last + 1])
        for method, _operation in iter_operations(path_item, include_deprecated):
            folder_key = _ensure_folder(tree, segments, last)
            request_key = NodeKey.path_request(path_identifier, method)
            tree.set_node(
                TreeNode(
                    key=request_key,
                    meta=PathRequestMeta(
                        path=full_path,
                        method=method,
                        path_identifier=path_identifier,
                    ),
                )
            )
            tree.set_edge(folder_key, request_key)

    return tree


def split_path(path: str) -> list[str]:
    """Split *path* into its non-empty segments.

    The root path ``/`` is kept whole as a single segment so its operations
    still get a folder of their own.

    Example::

        >>> split_path("/api//users/{id}/")
        ['api', 'users', '{id}']
        >>> split_path("/")
        ['/']
    """
    if path == "/":
        return [path]
    return [segment for segment in path.split("/") if segment]


def _join(segments: list[str]) -> str:
    return "/".join(segments)


def _ensure_folder(tree: CollectionTree, segments: list[str], index: int) -> NodeKey:
    """Create the folder for ``segments[: index + 1]`` if needed and link it.

    The parent is the folder one level up, or the root for the first
    segment. Returns the folder's key.
    """
    path_identifier = _join(segments[: index + 1])
    key = NodeKey.path_folder(path_identifier)
    parent = ROOT_KEY if index == 0 else NodeKey.path_folder(_join(segments[:index]))

    if not tree.has_node(key):
        segment = segments[index]
        tree.set_node(
            TreeNode(
                key=key,
                meta=PathFolderMeta(
                    name=segment,
                    path=segment,
                    path_identifier=path_identifier,
                ),
            )
        )
    if not tree.has_edge(parent, key):
        tree.set_edge(parent, key)
    return key
