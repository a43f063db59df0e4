"""Assign notes to index groups by their primary tag."""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Sequence, Tuple

from notesync.models import Document, Group

UNCATEGORIZED = "uncategorized"

# Checked top to bottom; the first entry containing the primary tag wins.
GROUP_TABLE: Tuple[Tuple[FrozenSet[str], Group], ...] = (
    (frozenset({"x402", "payments", "protocols"}), Group.PROTOCOLS),
    (frozenset({"smart-accounts", "signing", "erc-4337", "eip-1271"}), Group.INFRASTRUCTURE),
    (
        frozenset({"agent-autonomy", "session-keys", "passkeys", "webauthn", "browser-automation"}),
        Group.AGENT_AUTONOMY,
    ),
)

FALLBACK_GROUP = Group.OTHER

GROUP_ORDER: Tuple[Group, ...] = (
    Group.AGENT_AUTONOMY,
    Group.PROTOCOLS,
    Group.INFRASTRUCTURE,
    Group.OTHER,
)


def primary_tag(tags: Sequence[str]) -> str:
    return tags[0] if tags else UNCATEGORIZED


def classify_tags(tags: Sequence[str]) -> Group:
    """Map a tag sequence to exactly one group."""
    tag = primary_tag(tags)
    for members, group in GROUP_TABLE:
        if tag in members:
            return group
    return FALLBACK_GROUP


def classify(document: Document) -> Group:
    return classify_tags(document.tags)


def group_documents(documents: Iterable[Document]) -> List[Tuple[Group, List[Document]]]:
    """Bucket documents by group.

    Scan order is kept within a group. A document whose path or slug is already
    in its group is dropped. Only non-empty groups are returned, in
    ``GROUP_ORDER``.
    """
    buckets: Dict[Group, List[Document]] = {}
    for document in documents:
        members = buckets.setdefault(classify(document), [])
        if any(m.path == document.path or m.slug == document.slug for m in members):
            continue
        members.append(document)
    return [(group, buckets[group]) for group in GROUP_ORDER if buckets.get(group)]
