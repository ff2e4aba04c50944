"""Add a webhook folder to an already-built tree.

Runs after either base strategy. When the specification declares webhooks,
a single ``webhook~folder`` node is attached to the root and every webhook
verb becomes a ``webhook~request`` node inside it. Unlike path items, any
verb key is accepted here; only the deprecation rule applies.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from apitree.generator.filters import iter_operations
from apitree.models import (
    ROOT_KEY,
    NodeKey,
    TreeNode,
    WebhookFolderMeta,
    WebhookRequestMeta,
)
from apitree.tree import CollectionTree


def add_webhook_endpoints(
    tree: CollectionTree,
    webhooks: Optional[Mapping[str, Any]],
    *,
    include_deprecated: bool = False,
) -> CollectionTree:
    """Attach the webhook folder and its requests to *tree* in place.

    Args:
        tree: Tree produced by a base strategy; modified in place.
        webhooks: The specification's ``webhooks`` mapping (name -> verb ->
            operation). ``None`` or an empty mapping leaves *tree* unchanged.
        include_deprecated: Keep webhook operations flagged deprecated.

    Returns:
        The same *tree*, for chaining.
    """
    if not webhooks:
        return tree

    folder_key = NodeKey.webhook_folder()
    tree.set_node(TreeNode(key=folder_key, meta=WebhookFolderMeta()))
    tree.set_edge(ROOT_KEY, folder_key)

    for name, operations in webhooks.items():
        for method, _operation in iter_operations(
            operations, include_deprecated, allowed_only=False
        ):
            request_key = NodeKey.webhook_request(name, method)
            tree.set_node(
                TreeNode(key=request_key, meta=WebhookRequestMeta(path=name, method=method))
            )
            tree.set_edge(folder_key, request_key)

    return tree
