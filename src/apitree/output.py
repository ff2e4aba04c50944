"""Render a :class:`~apitree.tree.CollectionTree` for people to read.

Two views of the same hierarchy are offered:

* :func:`build_rich_tree` -- a :class:`rich.tree.Tree` renderable, coloured
  by node kind, for printing on a :class:`rich.console.Console`.
* :func:`format_tree` -- the same view as plain text (no colour, no
  markup), suitable for logs and snapshot tests.

Neither function prints or writes anything; the caller decides where output
goes.
"""

from __future__ import annotations

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from apitree.models import (
    NodeKind,
    PathFolderMeta,
    TagFolderMeta,
    TreeNode,
    WebhookFolderMeta,
)
from apitree.naming import get_collection_name, trim_request_name
from apitree.tree import CollectionTree

_STYLE_BY_KIND: dict[NodeKind, str] = {
    NodeKind.COLLECTION: "bold",
    NodeKind.FOLDER: "bold cyan",
    NodeKind.REQUEST: "green",
    NodeKind.WEBHOOK_FOLDER: "bold magenta",
    NodeKind.WEBHOOK_REQUEST: "magenta",
}


def node_label(node: TreeNode, title: Optional[str] = None) -> str:
    """Return the plain-text label shown for *node*.

    * collection -> the API title (or the default collection name),
    * folders -> their name, plus the tag description when there is one,
    * requests -> ``METHOD path``.
    """
    meta = node.meta
    if node.kind == NodeKind.COLLECTION:
        return get_collection_name(title)
    if isinstance(meta, TagFolderMeta):
        if meta.description:
            return f"{meta.name} -- {meta.description}"
        return meta.name
    if isinstance(meta, (PathFolderMeta, WebhookFolderMeta)):
        return meta.name
    return trim_request_name(f"{meta.method.upper()} {meta.path}")


def build_rich_tree(tree: CollectionTree, title: Optional[str] = None) -> Tree:
    """Build a :class:`rich.tree.Tree` mirroring *tree*'s hierarchy.

    Args:
        tree: The generated collection tree.
        title: API title used as the root label; see
            :func:`~apitree.naming.get_collection_name`.

    Returns:
        A Rich renderable. Print it with ``Console().print(...)``.
    """
    rendered = Tree(_styled(tree.root, title))

    def _add_children(branch: Tree, node: TreeNode) -> None:
        for child in tree.children(node.key):
            _add_children(branch.add(_styled(child, title)), child)

    _add_children(rendered, tree.root)
    return rendered


def format_tree(tree: CollectionTree, title: Optional[str] = None, width: int = 120) -> str:
    """Return :func:`build_rich_tree` output as plain, uncoloured text."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=width, color_system=None)
    console.print(build_rich_tree(tree, title))
    return buffer.getvalue()


def _styled(node: TreeNode, title: Optional[str]) -> str:
    style = _STYLE_BY_KIND[node.kind]
    return f"[{style}]{escape(node_label(node, title))}[/{style}]"
