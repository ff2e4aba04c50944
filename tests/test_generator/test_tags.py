"""Tests for apitree.generator.tags.

Covers:
- One folder per declared tag, including tags with no operations
- Fan-out: an operation with N tags yields N independent request nodes
- Untagged operations attach to the root
- Undeclared tags get a folder on first use, appended after declared ones
- Duplicate tag declarations (first description wins)
- Deprecated filtering and non-verb keys
- tag_descriptions helper
"""

from __future__ import annotations

from typing import Any

import pytest

from apitree.generator.tags import build_tree_from_tags, tag_descriptions
from apitree.models import (
    ROOT_KEY,
    NodeKey,
    NodeKind,
    TagFolderMeta,
    TagRequestMeta,
    UntaggedRequestMeta,
)
from conftest import child_ids, edge_ids, node_ids


class TestTagDescriptions:
    def test_declaration_order(self) -> None:
        result = tag_descriptions(
            [{"name": "b", "description": "B"}, {"name": "a"}]
        )
        assert list(result.items()) == [("b", "B"), ("a", None)]

    def test_first_occurrence_wins(self) -> None:
        result = tag_descriptions(
            [{"name": "Pet", "description": "first"}, {"name": "Pet", "description": "second"}]
        )
        assert result == {"Pet": "first"}

    def test_none_and_nameless_entries(self) -> None:
        assert tag_descriptions(None) == {}
        assert tag_descriptions([{"description": "no name"}, "junk"]) == {}


class TestDeclaredFolders:
    def test_folder_per_declared_tag(self) -> None:
        tree = build_tree_from_tags(
            {},
            [{"name": "Pet", "description": "Pets"}, {"name": "Unused"}],
        )

        assert node_ids(tree) == ["root:collection", "tag:folder:Pet", "tag:folder:Unused"]
        assert edge_ids(tree) == [
            ("root:collection", "tag:folder:Pet"),
            ("root:collection", "tag:folder:Unused"),
        ]

    def test_unused_tag_folder_is_empty(self) -> None:
        tree = build_tree_from_tags({"/pets": {"get": {"tags": ["Pet"]}}}, [
            {"name": "Pet"},
            {"name": "Unused"},
        ])
        assert child_ids(tree, "tag:folder:Unused") == []

    def test_folder_meta(self) -> None:
        tree = build_tree_from_tags({}, [{"name": "Pet", "description": "Pets"}])
        folder = tree.node(NodeKey.tag_folder("Pet"))

        assert isinstance(folder.meta, TagFolderMeta)
        assert folder.meta.name == "Pet"
        assert folder.meta.description == "Pets"
        assert folder.meta.path == ""

    def test_duplicate_declaration_creates_one_folder(self) -> None:
        tree = build_tree_from_tags({}, [{"name": "Pet"}, {"name": "Pet"}])
        assert len(tree.nodes_of_kind(NodeKind.FOLDER)) == 1


class TestFanOut:
    def test_two_tags_two_requests(self) -> None:
        tree = build_tree_from_tags(
            {"/pets": {"get": {"tags": ["Pet", "Store"]}}},
            [{"name": "Pet"}, {"name": "Store"}],
        )

        requests = tree.nodes_of_kind(NodeKind.REQUEST)
        assert [str(r.key) for r in requests] == [
            "tag:request:Pet:/pets:get",
            "tag:request:Store:/pets:get",
        ]
        assert requests[0].key != requests[1].key
        assert child_ids(tree, "tag:folder:Pet") == ["tag:request:Pet:/pets:get"]
        assert child_ids(tree, "tag:folder:Store") == ["tag:request:Store:/pets:get"]

    def test_fanned_out_nodes_are_independent(self) -> None:
        tree = build_tree_from_tags(
            {"/pets": {"get": {"tags": ["Pet", "Store"]}}},
            [{"name": "Pet"}, {"name": "Store"}],
        )
        pet = tree.node(NodeKey.tag_request("Pet", "/pets", "get"))
        store = tree.node(NodeKey.tag_request("Store", "/pets", "get"))

        assert pet is not store
        assert pet.payload is not store.payload
        assert [p.key for p in tree.parents(pet.key)] == [NodeKey.tag_folder("Pet")]
        assert [p.key for p in tree.parents(store.key)] == [NodeKey.tag_folder("Store")]

    def test_request_meta(self) -> None:
        tree = build_tree_from_tags({"/pets/{id}": {"put": {"tags": ["Pet"]}}}, [])
        request = tree.node(NodeKey.tag_request("Pet", "/pets/{id}", "put"))

        assert isinstance(request.meta, TagRequestMeta)
        assert request.meta.tag == "Pet"
        assert request.meta.path == "/pets/{id}"
        assert request.meta.method == "put"

    def test_repeated_tag_in_one_operation(self) -> None:
        tree = build_tree_from_tags({"/pets": {"get": {"tags": ["Pet", "Pet"]}}}, [{"name": "Pet"}])
        assert child_ids(tree, "tag:folder:Pet") == ["tag:request:Pet:/pets:get"]


class TestUntagged:
    def test_untagged_attaches_to_root(self) -> None:
        tree = build_tree_from_tags({"/health": {"get": {}}}, [])

        assert edge_ids(tree) == [("root:collection", "tag:request:/health:get")]
        request = tree.node(NodeKey.untagged_request("/health", "get"))
        assert isinstance(request.meta, UntaggedRequestMeta)
        assert request.meta.path == "/health"

    def test_empty_tag_list_counts_as_untagged(self) -> None:
        tree = build_tree_from_tags({"/health": {"get": {"tags": []}}}, [])
        assert child_ids(tree, "root:collection") == ["tag:request:/health:get"]

    def test_untagged_key_never_collides_with_tagged_key(self) -> None:
        assert NodeKey.untagged_request("/pets", "get") != NodeKey.tag_request("", "/pets", "get")


class TestUndeclaredTags:
    def test_folder_created_on_first_use(self) -> None:
        tree = build_tree_from_tags({"/orders": {"get": {"tags": ["Billing"]}}}, [])

        folder = tree.node(NodeKey.tag_folder("Billing"))
        assert folder.meta.description is None
        assert folder.meta.path == "/orders"
        assert child_ids(tree, "tag:folder:Billing") == ["tag:request:Billing:/orders:get"]

    def test_appended_after_declared_folders(self) -> None:
        tree = build_tree_from_tags(
            {"/orders": {"get": {"tags": ["Billing", "Store"]}}},
            [{"name": "Store"}, {"name": "Admin"}],
        )
        assert child_ids(tree, "root:collection") == [
            "tag:folder:Store",
            "tag:folder:Admin",
            "tag:folder:Billing",
        ]


class TestFiltering:
    def test_deprecated_skipped(self) -> None:
        tree = build_tree_from_tags(
            {"/pets": {"get": {"tags": ["Pet"], "deprecated": True}}}, [{"name": "Pet"}]
        )
        assert child_ids(tree, "tag:folder:Pet") == []

    def test_deprecated_included(self) -> None:
        tree = build_tree_from_tags(
            {"/pets": {"get": {"tags": ["Pet"], "deprecated": True}}},
            [{"name": "Pet"}],
            include_deprecated=True,
        )
        assert child_ids(tree, "tag:folder:Pet") == ["tag:request:Pet:/pets:get"]

    def test_deprecated_undeclared_tag_gets_no_folder(self) -> None:
        tree = build_tree_from_tags({"/pets": {"get": {"tags": ["Ghost"], "deprecated": True}}}, [])
        assert node_ids(tree) == ["root:collection"]

    def test_non_verb_keys_ignored(self) -> None:
        tree = build_tree_from_tags(
            {"/pets": {"parameters": [], "summary": "s", "get": {"tags": ["Pet"]}}}, []
        )
        assert len(tree.nodes_of_kind(NodeKind.REQUEST)) == 1


class TestPetstore:
    @pytest.fixture()
    def tree(self, petstore_31_raw: dict[str, Any]):
        return build_tree_from_tags(petstore_31_raw["paths"], petstore_31_raw["tags"])

    def test_root_children(self, tree) -> None:
        assert child_ids(tree, "root:collection") == [
            "tag:folder:pets",
            "tag:folder:store",
            "tag:folder:admin",
            "tag:folder:billing",
            "tag:request:/health:get",
        ]

    def test_pets_folder(self, tree) -> None:
        assert child_ids(tree, "tag:folder:pets") == [
            "tag:request:pets:/pets:get",
            "tag:request:pets:/pets:post",
            "tag:request:pets:/pets/{petId}:get",
        ]

    def test_store_folder(self, tree) -> None:
        assert child_ids(tree, "tag:folder:store") == [
            "tag:request:store:/pets:post",
            "tag:request:store:/store/orders/{orderId}:get",
        ]

    def test_counts(self, tree) -> None:
        assert len(tree) == 12
        assert len(tree.edges()) == 11
        assert tree.parents(ROOT_KEY) == []
