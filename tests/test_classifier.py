"""Tests for note classification."""

from __future__ import annotations

import pytest

from notesync.index.classifier import (
    GROUP_ORDER,
    GROUP_TABLE,
    UNCATEGORIZED,
    classify,
    classify_tags,
    group_documents,
    primary_tag,
)
from notesync.models import Document, Group


def _doc(slug: str, *tags: str, path: str | None = None) -> Document:
    return Document(path=path or f"notes/{slug}.md", slug=slug, tags=tuple(tags))


class TestClassifyTags:
    """Test classify_tags."""

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("x402", Group.PROTOCOLS),
            ("payments", Group.PROTOCOLS),
            ("protocols", Group.PROTOCOLS),
            ("smart-accounts", Group.INFRASTRUCTURE),
            ("erc-4337", Group.INFRASTRUCTURE),
            ("eip-1271", Group.INFRASTRUCTURE),
            ("signing", Group.INFRASTRUCTURE),
            ("agent-autonomy", Group.AGENT_AUTONOMY),
            ("session-keys", Group.AGENT_AUTONOMY),
            ("passkeys", Group.AGENT_AUTONOMY),
            ("webauthn", Group.AGENT_AUTONOMY),
            ("browser-automation", Group.AGENT_AUTONOMY),
        ],
    )
    def test_known_tags(self, tag: str, expected: Group) -> None:
        """Should map each table tag to its group."""
        assert classify_tags([tag]) is expected

    def test_only_first_tag_counts(self) -> None:
        """Should ignore every tag after the first."""
        assert classify_tags(["signing", "payments"]) is Group.INFRASTRUCTURE
        assert classify_tags(["misc", "payments"]) is Group.OTHER

    def test_unknown_tag_falls_back(self) -> None:
        """Should assign the fallback group to unknown tags."""
        assert classify_tags(["gardening"]) is Group.OTHER

    def test_empty_tags(self) -> None:
        """Should treat missing tags as uncategorized."""
        assert primary_tag([]) == UNCATEGORIZED
        assert classify_tags([]) is Group.OTHER

    def test_deterministic(self) -> None:
        """Should return the same group for the same tags every time."""
        results = {classify_tags(["webauthn", "x402"]) for _ in range(10)}
        assert results == {Group.AGENT_AUTONOMY}

    def test_table_groups_are_disjoint(self) -> None:
        """No tag may belong to two table entries."""
        seen: set[str] = set()
        for members, _group in GROUP_TABLE:
            assert not (members & seen)
            seen |= members

    def test_classify_document(self) -> None:
        """Should classify a Document by its tags."""
        assert classify(_doc("escrow", "payments")) is Group.PROTOCOLS


class TestGroupDocuments:
    """Test group_documents."""

    def test_groups_in_render_order(self) -> None:
        """Should return non-empty groups in the fixed order."""
        docs = [
            _doc("a", "misc"),
            _doc("b", "payments"),
            _doc("c", "passkeys"),
            _doc("d", "signing"),
        ]

        groups = group_documents(docs)

        assert [group for group, _ in groups] == list(GROUP_ORDER)

    def test_omits_empty_groups(self) -> None:
        """Should not return groups without members."""
        groups = group_documents([_doc("a", "payments"), _doc("b", "x402")])

        assert [group for group, _ in groups] == [Group.PROTOCOLS]

    def test_preserves_scan_order(self) -> None:
        """Should keep insertion order within a group."""
        groups = dict(group_documents([_doc("z", "x402"), _doc("a", "payments")]))

        assert [d.slug for d in groups[Group.PROTOCOLS]] == ["z", "a"]

    def test_duplicate_slug_first_wins(self) -> None:
        """Should keep only the first document with a given slug."""
        first = _doc("dup", "payments", path="notes/dup.md")
        second = _doc("dup", "x402", path="notes/other/dup.md")

        groups = dict(group_documents([first, second]))

        assert groups[Group.PROTOCOLS] == [first]

    def test_duplicate_path_first_wins(self) -> None:
        """Should keep only the first document with a given path."""
        first = _doc("one", "payments", path="notes/same.md")
        second = _doc("two", "payments", path="notes/same.md")

        groups = dict(group_documents([first, second]))

        assert groups[Group.PROTOCOLS] == [first]

    def test_empty_input(self) -> None:
        """Should return nothing for no documents."""
        assert group_documents([]) == []
