"""Tree generator -- turn an API specification into a folder/request tree.

Typical usage::

    from apitree.generator import generate_skeleton_tree

    tree = generate_skeleton_tree(openapi, {"folderStrategy": "paths"})

Sub-modules:

* :mod:`~apitree.generator.filters` -- The HTTP-method allow-list and the
  deprecation rule shared by every builder.
* :mod:`~apitree.generator.paths` -- Folders per URL path segment.
* :mod:`~apitree.generator.tags` -- Folders per tag, with one request node
  per tag an operation declares.
* :mod:`~apitree.generator.webhooks` -- The optional webhook folder.
* :mod:`~apitree.generator.skeleton` -- Strategy selection; the entry point.
"""

from apitree.generator.paths import build_tree_from_paths
from apitree.generator.skeleton import generate_skeleton_tree
from apitree.generator.tags import build_tree_from_tags
from apitree.generator.webhooks import add_webhook_endpoints

__all__ = [
    "generate_skeleton_tree",
    "build_tree_from_paths",
    "build_tree_from_tags",
    "add_webhook_endpoints",
]
