"""apitree -- Organize OpenAPI operations into a collection folder tree.

This package takes a parsed OpenAPI document and produces a
:class:`~apitree.tree.CollectionTree`: a root collection node, folders, and
one request node per operation, arranged the way a request-collection tool
presents endpoints for browsing. Two layouts are available -- folders per URL
path segment, or folders per tag -- and webhooks can be gathered into a
folder of their own.

Typical usage::

    from apitree import generate_skeleton_tree

    tree = generate_skeleton_tree(openapi, {"folderStrategy": "tags"})
    for node in tree.nodes_of_kind(NodeKind.REQUEST):
        print(node.meta.method, node.meta.path)

The tree records *where* each request goes. Building the requests themselves
(parameters, bodies, auth, examples) is the job of whatever consumes it.

Modules:
    generator: Tree builders and the :func:`generate_skeleton_tree` entry point.
    tree: The ordered node/edge store.
    models: Pydantic models shared across the entire package.
    config: Option resolution and validation.
    exceptions: Exception hierarchy with exit-code mapping.
    naming: Item-naming and URL-variable string helpers.
    output: Rich and plain-text rendering of a tree.
"""

from apitree.generator import generate_skeleton_tree
from apitree.models import FolderStrategy, NodeKey, NodeKind, TreeOptions
from apitree.tree import CollectionTree

__version__ = "0.1.0"

__all__ = [
    "generate_skeleton_tree",
    "CollectionTree",
    "FolderStrategy",
    "NodeKey",
    "NodeKind",
    "TreeOptions",
]
