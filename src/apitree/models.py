"""Canonical Pydantic models shared across all apitree modules.

This is the single source of truth for data shapes in the project. The models
fall into three groups:

**Options** -- how a tree is built:
    :class:`FolderStrategy` and :class:`TreeOptions`.

**Node identity** -- structural keys that make folder creation idempotent:
    :class:`NodeKind`, :class:`KeyNamespace` and :class:`NodeKey`.

**Node records** -- what the store holds:
    the frozen metadata variants (:class:`PathFolderMeta`,
    :class:`TagRequestMeta`, ...) and :class:`TreeNode`, which refuses any
    metadata variant that does not belong to its kind.

All models use Pydantic v2. Metadata and keys are frozen: they are populated
when a node is created and never change afterwards.
"""

from __future__ import annotations

import enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# --- Options ---


class FolderStrategy(str, enum.Enum):
    """How request nodes are grouped into folders."""

    PATHS = "paths"
    TAGS = "tags"


class TreeOptions(BaseModel):
    """Options accepted by :func:`~apitree.generator.generate_skeleton_tree`.

    Field names are snake_case; the camelCase names used by collection
    converters (``folderStrategy``, ``includeWebhooks``,
    ``includeDeprecated``) are accepted as aliases so option mappings can be
    passed through unchanged.

    Example::

        TreeOptions(folder_strategy="tags", include_webhooks=True)
        TreeOptions.model_validate({"folderStrategy": "paths"})
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    folder_strategy: FolderStrategy = Field(
        default=FolderStrategy.PATHS,
        alias="folderStrategy",
        description="Base strategy: 'paths' groups by URL segments, 'tags' by declared tags",
    )
    include_webhooks: bool = Field(
        default=False,
        alias="includeWebhooks",
        description="Add a webhook folder after the base strategy runs",
    )
    include_deprecated: bool = Field(
        default=False,
        alias="includeDeprecated",
        description="Keep operations and webhooks marked deprecated",
    )


# --- HTTP methods ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods that may produce a request node under a path item.

    Any other key in a path item (``parameters``, ``summary``, ``servers``,
    ``$ref``, ...) is not an operation and never yields a node.
    """

    GET = "get"
    HEAD = "head"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"
    CONNECT = "connect"
    OPTIONS = "options"
    TRACE = "trace"


# --- Node identity ---


class NodeKind(str, enum.Enum):
    """Closed set of node kinds that can appear in a :class:`~apitree.tree.CollectionTree`."""

    COLLECTION = "collection"
    FOLDER = "folder"
    REQUEST = "request"
    WEBHOOK_FOLDER = "webhook~folder"
    WEBHOOK_REQUEST = "webhook~request"


class KeyNamespace(str, enum.Enum):
    """The builder that owns a key.

    Keeping the namespace in the key means a path-strategy folder named
    ``Pet`` and a tag-strategy folder for tag ``Pet`` are different nodes.
    """

    ROOT = "root"
    PATH = "path"
    TAG = "tag"
    WEBHOOK = "webhook"


class NodeKey(BaseModel):
    """Structural identifier of a node.

    Two keys are equal only when namespace, kind and every part match, so
    keys built from the same input are always equal and keys built by
    different strategies never are. ``str(key)`` renders a readable form such
    as ``path:folder:user/{id}`` for logs; it is not used for lookups.

    Use the classmethod constructors rather than building keys by hand.
    """

    model_config = ConfigDict(frozen=True)

    namespace: KeyNamespace
    kind: NodeKind
    parts: tuple[str, ...] = ()

    def __str__(self) -> str:
        return ":".join([self.namespace.value, self.kind.value, *self.parts])

    @classmethod
    def root(cls) -> NodeKey:
        return cls(namespace=KeyNamespace.ROOT, kind=NodeKind.COLLECTION)

    @classmethod
    def path_folder(cls, path_identifier: str) -> NodeKey:
        return cls(
            namespace=KeyNamespace.PATH,
            kind=NodeKind.FOLDER,
            parts=(path_identifier,),
        )

    @classmethod
    def path_request(cls, path_identifier: str, method: str) -> NodeKey:
        return cls(
            namespace=KeyNamespace.PATH,
            kind=NodeKind.REQUEST,
            parts=(path_identifier, method),
        )

    @classmethod
    def tag_folder(cls, tag: str) -> NodeKey:
        return cls(namespace=KeyNamespace.TAG, kind=NodeKind.FOLDER, parts=(tag,))

    @classmethod
    def tag_request(cls, tag: str, path: str, method: str) -> NodeKey:
        return cls(
            namespace=KeyNamespace.TAG,
            kind=NodeKind.REQUEST,
            parts=(tag, path, method),
        )

    @classmethod
    def untagged_request(cls, path: str, method: str) -> NodeKey:
        # Two parts against the three of a tagged request: the two can never
        # be equal even when a tag name looks like a path.
        return cls(
            namespace=KeyNamespace.TAG,
            kind=NodeKind.REQUEST,
            parts=(path, method),
        )

    @classmethod
    def webhook_folder(cls) -> NodeKey:
        return cls(namespace=KeyNamespace.WEBHOOK, kind=NodeKind.WEBHOOK_FOLDER)

    @classmethod
    def webhook_request(cls, name: str, method: str) -> NodeKey:
        return cls(
            namespace=KeyNamespace.WEBHOOK,
            kind=NodeKind.WEBHOOK_REQUEST,
            parts=(name, method),
        )


ROOT_KEY = NodeKey.root()
"""Key of the single collection node; renders as ``root:collection``."""

WEBHOOK_FOLDER_NAME = "webhook~folder"


# --- Node metadata ---


class _Meta(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class CollectionMeta(_Meta):
    """Metadata of the root node (intentionally empty)."""


class PathFolderMeta(_Meta):
    """A folder created by the path-segmentation strategy."""

    name: str = Field(description="The path segment this folder stands for")
    path: str = Field(description="Same as name; kept for downstream consumers")
    path_identifier: str = Field(
        description="'/'-joined segments up to and including this one"
    )


class PathRequestMeta(_Meta):
    """A request created by the path-segmentation strategy."""

    path: str = Field(description="Full path as declared, e.g. '/user/{id}'")
    method: str
    path_identifier: str


class TagFolderMeta(_Meta):
    """A folder created by the tag-grouping strategy, one per tag."""

    name: str
    description: Optional[str] = None
    path: str = Field(
        default="",
        description="Empty for declared tags; the first referencing path otherwise",
    )


class TagRequestMeta(_Meta):
    """A request filed under one of its operation's tags."""

    tag: str
    path: str
    method: str


class UntaggedRequestMeta(_Meta):
    """A request whose operation declares no tags; attached to the root."""

    path: str
    method: str


class WebhookFolderMeta(_Meta):
    """The single folder holding every webhook request."""

    name: str = WEBHOOK_FOLDER_NAME
    path: str = WEBHOOK_FOLDER_NAME
    description: str = ""


class WebhookRequestMeta(_Meta):
    """A request for one webhook verb; ``path`` holds the webhook name."""

    path: str
    method: str


NodeMeta = Union[
    CollectionMeta,
    PathFolderMeta,
    PathRequestMeta,
    TagFolderMeta,
    TagRequestMeta,
    UntaggedRequestMeta,
    WebhookFolderMeta,
    WebhookRequestMeta,
]

_META_BY_KIND: dict[NodeKind, tuple[type[_Meta], ...]] = {
    NodeKind.COLLECTION: (CollectionMeta,),
    NodeKind.FOLDER: (PathFolderMeta, TagFolderMeta),
    NodeKind.REQUEST: (PathRequestMeta, TagRequestMeta, UntaggedRequestMeta),
    NodeKind.WEBHOOK_FOLDER: (WebhookFolderMeta,),
    NodeKind.WEBHOOK_REQUEST: (WebhookRequestMeta,),
}

_META_BY_NAMESPACE: dict[KeyNamespace, tuple[type[_Meta], ...]] = {
    KeyNamespace.ROOT: (CollectionMeta,),
    KeyNamespace.PATH: (PathFolderMeta, PathRequestMeta),
    KeyNamespace.TAG: (TagFolderMeta, TagRequestMeta, UntaggedRequestMeta),
    KeyNamespace.WEBHOOK: (WebhookFolderMeta, WebhookRequestMeta),
}


class TreeNode(BaseModel):
    """A node record stored in a :class:`~apitree.tree.CollectionTree`.

    The node's kind comes from its key. ``meta`` must be one of the variants
    that belong to that kind *and* to the key's namespace, so a path-strategy
    request can never carry tag metadata. ``payload`` is an empty dict left
    for the stage that materializes concrete requests; nothing in apitree
    writes to it.
    """

    model_config = ConfigDict(frozen=True)

    key: NodeKey
    meta: NodeMeta
    payload: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_meta_variant(self) -> TreeNode:
        allowed = _META_BY_KIND[self.key.kind]
        if not isinstance(self.meta, allowed) or not isinstance(
            self.meta, _META_BY_NAMESPACE[self.key.namespace]
        ):
            raise ValueError(
                f"{type(self.meta).__name__} is not valid metadata for node {self.key}"
            )
        return self

    @property
    def kind(self) -> NodeKind:
        return self.key.kind
