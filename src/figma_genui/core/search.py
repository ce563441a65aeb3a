from __future__ import annotations

import logging
from typing import Any

from figma_genui.core.traversal import child_nodes
from figma_genui.models import NodeSummary

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10
DEFAULT_SEARCH_DEPTH = 10


def _matches(node: dict[str, Any], needle: str) -> bool:
    name = node.get("name")
    return isinstance(name, str) and needle in name.casefold()


def search_nodes_by_name(
    document: dict[str, Any],
    query: str,
    max_results: int = DEFAULT_MAX_RESULTS,
    max_depth: int = DEFAULT_SEARCH_DEPTH,
) -> list[NodeSummary]:
    """Case-insensitive substring search over node names, in document order.

    Nodes deeper than ``max_depth`` (root is 0) are not inspected. Nodes without a name
    never match.
    """
    needle = query.casefold()
    matches: list[NodeSummary] = []
    stack: list[tuple[dict[str, Any], int]] = [(document, 0)]

    while stack and len(matches) < max_results:
        node, depth = stack.pop()
        if _matches(node, needle):
            node_type = str(node.get("type") or "")
            logger.debug("Found matching node: %s (%s) with ID %s", node.get("name"), node_type, node.get("id"))
            matches.append(
                NodeSummary(
                    id=str(node.get("id", "")),
                    name=node["name"],
                    type=node_type or "Unknown",
                    description=node.get("description") or f"A {node_type.lower() or 'node'} from Figma",
                )
            )

        if depth < max_depth:
            stack.extend((child, depth + 1) for child in reversed(child_nodes(node)))

    return matches
