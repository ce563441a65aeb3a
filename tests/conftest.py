"""Shared fixtures and helpers for tests."""

from pathlib import Path
from typing import Any

import pytest

from figma_genui.core.context import DesignContext
from figma_genui.figma import InMemoryDesignApi, InMemoryFile

_TESTS_ROOT = Path(__file__).parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        parts = test_path.relative_to(_TESTS_ROOT).parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Document builders
# ---------------------------------------------------------------------------


def node(node_id: str, name: str, node_type: str, *children: dict[str, Any], **extra: Any) -> dict[str, Any]:
    result: dict[str, Any] = {"id": node_id, "name": name, "type": node_type, **extra}
    if children:
        result["children"] = list(children)
    return result


def sample_document() -> dict[str, Any]:
    """Two pages; the first mixes shapes, frames, instances and a component set."""
    return node(
        "0:0",
        "Document",
        "DOCUMENT",
        node(
            "0:1",
            "Page 1",
            "CANVAS",
            node("3:1", "Background", "RECTANGLE"),
            node(
                "1:1",
                "Navbar",
                "FRAME",
                node("1:2", "nav-icon", "VECTOR"),
                node("1:3", "Button", "INSTANCE"),
            ),
            node("4:1", "Card instance", "INSTANCE"),
            node(
                "2:1",
                "Buttons",
                "COMPONENT_SET",
                node("2:2", "Type=Primary", "COMPONENT", description="Primary call to action"),
                node("2:3", "Type=Secondary", "COMPONENT"),
            ),
        ),
        node(
            "0:2",
            "Page 2",
            "CANVAS",
            node("5:1", "Navigation", "FRAME"),
            node("6:1", "Footer", "FRAME"),
        ),
    )


def nested_frames(depth: int) -> dict[str, Any]:
    """A single chain of FRAMEs, ``d0`` at the root down to ``d{depth}``."""
    current = node(f"d{depth}", f"Level {depth}", "FRAME")
    for level in range(depth - 1, -1, -1):
        current = node(f"d{level}", f"Level {level}", "FRAME", current)
    return current


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def document() -> dict[str, Any]:
    return sample_document()


@pytest.fixture
def design_file() -> InMemoryFile:
    return InMemoryFile(key="ABC123", name="Design System", document=sample_document())


@pytest.fixture
def api(design_file: InMemoryFile) -> InMemoryDesignApi:
    other = InMemoryFile(key="XYZ789", name="Marketing Site", document=node("0:0", "Document", "DOCUMENT"))
    return InMemoryDesignApi([design_file, other])


@pytest.fixture
def ctx(api: InMemoryDesignApi) -> DesignContext:
    return DesignContext(api=api)
