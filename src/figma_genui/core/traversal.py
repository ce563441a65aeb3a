"""Bounded walks over a Figma document tree.

Two walks live here, each with its own set of significant node types:

* ``collect_nodes`` is the full bounded traversal behind file resources. It keeps
  FRAME, COMPONENT and COMPONENT_SET nodes and visits those types first among siblings.
* ``scan_top_level`` is the quick listing over pages and their direct children. It also
  keeps INSTANCE nodes and never sorts.

Both take a ``TypePolicy`` so callers can override the vocabulary per call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from figma_genui.models import NodeSummary

logger = logging.getLogger(__name__)

DEFAULT_MAX_NODES = 50
DEFAULT_MAX_DEPTH = 3
DEFAULT_TOP_LEVEL_LIMIT = 10


@dataclass(frozen=True)
class TypePolicy:
    """A set of node type tags treated as structurally significant."""

    types: frozenset[str]

    @classmethod
    def of(cls, *types: str) -> TypePolicy:
        return cls(frozenset(types))

    def contains(self, node_type: object) -> bool:
        return isinstance(node_type, str) and node_type in self.types

    def prioritize(self, nodes: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Stable partition: significant nodes first, original order kept within each group."""
        return sorted(nodes, key=lambda n: not self.contains(n.get("type")))


FULL_TRAVERSAL_TYPES = TypePolicy.of("FRAME", "COMPONENT", "COMPONENT_SET")
TOP_LEVEL_TYPES = TypePolicy.of("COMPONENT", "COMPONENT_SET", "FRAME", "INSTANCE")


def child_nodes(node: dict[str, Any]) -> list[dict[str, Any]]:
    """Children of ``node``; a missing or malformed ``children`` field makes it a leaf."""
    children = node.get("children")
    if not isinstance(children, list):
        return []
    return [c for c in children if isinstance(c, dict)]


def _summarize(node: dict[str, Any], description: str) -> NodeSummary:
    return NodeSummary(
        id=str(node.get("id", "")),
        name=str(node.get("name", "")),
        type=str(node.get("type", "")),
        description=node.get("description") or description,
    )


def collect_nodes(
    document: dict[str, Any],
    max_nodes: int = DEFAULT_MAX_NODES,
    max_depth: int = DEFAULT_MAX_DEPTH,
    policy: TypePolicy = FULL_TRAVERSAL_TYPES,
    source: str = "Figma",
) -> list[NodeSummary]:
    """Depth-first, pre-order collection of significant nodes.

    The root is depth 0 and is eligible itself. Children of a node at depth < ``max_depth``
    are visited, significant types first. The walk stops as soon as ``max_nodes`` is reached.
    """
    nodes: list[NodeSummary] = []
    stack: list[tuple[dict[str, Any], int]] = [(document, 0)]

    while stack and len(nodes) < max_nodes:
        node, depth = stack.pop()
        node_type = node.get("type")
        if policy.contains(node_type):
            nodes.append(_summarize(node, f"A {str(node_type).lower()} from {source}"))

        if depth < max_depth:
            ordered = policy.prioritize(child_nodes(node))
            stack.extend((child, depth + 1) for child in reversed(ordered))

    logger.debug("Collected %d nodes (max: %d, depth: %d)", len(nodes), max_nodes, max_depth)
    return nodes


def scan_top_level(
    document: dict[str, Any],
    limit: int = DEFAULT_TOP_LEVEL_LIMIT,
    policy: TypePolicy = TOP_LEVEL_TYPES,
) -> list[NodeSummary]:
    """Look only at pages, their direct children, and the variants of component sets."""
    components: list[NodeSummary] = []

    def _take(candidates: Iterable[dict[str, Any]]) -> None:
        for candidate in candidates:
            if len(components) >= limit:
                return
            if policy.contains(candidate.get("type")):
                components.append(_summarize(candidate, ""))

    for page in child_nodes(document):
        if len(components) >= limit:
            break
        logger.debug("Processing page: %s", page.get("name"))
        _take([page])

        for node in child_nodes(page):
            if len(components) >= limit:
                break
            if not policy.contains(node.get("type")):
                continue
            _take([node])
            if node.get("type") == "COMPONENT_SET":
                _take(child_nodes(node))

    logger.debug("Found %d top-level components", len(components))
    return components
