"""In-memory node/edge store that holds a generated collection tree.

:class:`CollectionTree` is a small ordered directed graph: an insertion-ordered
mapping from :class:`~apitree.models.NodeKey` to
:class:`~apitree.models.TreeNode`, plus per-node child and parent lists. It
supports exactly what the builders and the downstream materializer need --
insertion, existence checks and ordered iteration -- and nothing else. There is
no removal and no cycle detection; the builders only ever add edges that point
away from the root.

Iteration order is insertion order everywhere. Builders insert nodes and
edges in the order the specification declares paths, verbs and tags, so the
same input always yields the same iteration order.
"""

from __future__ import annotations

from typing import Iterator

from apitree.exceptions import TreeError
from apitree.models import ROOT_KEY, CollectionMeta, NodeKey, NodeKind, TreeNode


class CollectionTree:
    """Ordered directed graph of folder and request nodes.

    A new tree already contains the root collection node under
    :data:`~apitree.models.ROOT_KEY`.

    Example::

        tree = CollectionTree()
        key = NodeKey.path_folder("user")
        tree.set_node(TreeNode(key=key, meta=PathFolderMeta(...)))
        tree.set_edge(tree.root.key, key)
        for depth, node in tree.walk():
            ...
    """

    def __init__(self) -> None:
        self._nodes: dict[NodeKey, TreeNode] = {}
        self._children: dict[NodeKey, list[NodeKey]] = {}
        self._parents: dict[NodeKey, list[NodeKey]] = {}
        self._edges: dict[tuple[NodeKey, NodeKey], None] = {}
        self.set_node(TreeNode(key=ROOT_KEY, meta=CollectionMeta()))

    # ------------------------------------------------------------------ #
    # Nodes
    # ------------------------------------------------------------------ #

    @property
    def root(self) -> TreeNode:
        """The collection node every other node hangs from."""
        return self._nodes[ROOT_KEY]

    def has_node(self, key: NodeKey) -> bool:
        return key in self._nodes

    def set_node(self, node: TreeNode) -> None:
        """Create or overwrite the record stored under ``node.key``.

        Overwriting keeps the node's original position in iteration order
        and leaves its edges untouched.

        Raises:
            TreeError: If a non-collection node is stored under the root key
                or a second collection node is added.
        """
        if (node.key == ROOT_KEY) != (node.kind == NodeKind.COLLECTION):
            raise TreeError(f"Only the root may be a collection node (got {node.key})")
        self._nodes[node.key] = node
        self._children.setdefault(node.key, [])
        self._parents.setdefault(node.key, [])

    def node(self, key: NodeKey) -> TreeNode:
        """Return the record stored under *key*.

        Raises:
            TreeError: If no such node exists.
        """
        try:
            return self._nodes[key]
        except KeyError:
            raise TreeError(f"Unknown node: {key}") from None

    def nodes(self) -> list[TreeNode]:
        """All nodes in insertion order, the root first."""
        return list(self._nodes.values())

    def nodes_of_kind(self, kind: NodeKind) -> list[TreeNode]:
        return [node for node in self._nodes.values() if node.kind == kind]

    # ------------------------------------------------------------------ #
    # Edges
    # ------------------------------------------------------------------ #

    def has_edge(self, parent: NodeKey, child: NodeKey) -> bool:
        return (parent, child) in self._edges

    def set_edge(self, parent: NodeKey, child: NodeKey) -> None:
        """Add the directed edge ``parent -> child``.

        Adding an edge that already exists is a no-op.

        Raises:
            TreeError: If either endpoint is missing, the edge is a
                self-loop, or it points into the root.
        """
        if (parent, child) in self._edges:
            return
        if parent == child:
            raise TreeError(f"Self-loop on {parent}")
        if child == ROOT_KEY:
            raise TreeError(f"Edge from {parent} may not point into the root")
        for key in (parent, child):
            if key not in self._nodes:
                raise TreeError(f"Cannot link unknown node: {key}")

        self._edges[(parent, child)] = None
        self._children[parent].append(child)
        self._parents[child].append(parent)

    def edges(self) -> list[tuple[NodeKey, NodeKey]]:
        """All ``(parent, child)`` pairs in insertion order."""
        return list(self._edges)

    def children(self, key: NodeKey) -> list[TreeNode]:
        """Direct children of *key*, in the order their edges were added."""
        return [self._nodes[child] for child in self._children[self.node(key).key]]

    def parents(self, key: NodeKey) -> list[TreeNode]:
        return [self._nodes[parent] for parent in self._parents[self.node(key).key]]

    # ------------------------------------------------------------------ #
    # Traversal
    # ------------------------------------------------------------------ #

    def walk(self) -> Iterator[tuple[int, TreeNode]]:
        """Yield ``(depth, node)`` pairs depth-first from the root.

        Children are visited in edge order. The root has depth ``0``.
        """
        stack: list[tuple[int, NodeKey]] = [(0, ROOT_KEY)]
        while stack:
            depth, key = stack.pop()
            yield depth, self._nodes[key]
            for child in reversed(self._children[key]):
                stack.append((depth + 1, child))

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"CollectionTree(nodes={len(self._nodes)}, edges={len(self._edges)})"
