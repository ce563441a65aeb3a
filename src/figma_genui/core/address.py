"""Parsing of ``figma://`` resource addresses.

A node can be addressed three ways::

    figma://node/{fileKey}/{nodeId}   QualifiedAddress
    {fileKey}/{nodeId}                ShortAddress (split on the first slash)
    {nodeId}                          BareId (resolved against the active file)

A file is addressed as ``figma://file/{fileKey}`` or by its bare key.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from figma_genui.core.active_file import resolve_active_file
from figma_genui.core.context import DesignContext
from figma_genui.core.errors import MalformedAddressError

logger = logging.getLogger(__name__)

SCHEME = "figma://"

_QUALIFIED_NODE = re.compile(r"^figma://node/([^/]+)/(.+)$")
_QUALIFIED_FILE = re.compile(r"^figma://file/([^/]+)$")

ADDRESS_HELP = (
    "Valid URI formats:\n"
    "1. figma://node/{fileKey}/{nodeId}\n"
    "2. {fileKey}/{nodeId}\n"
    "3. {nodeId} (uses active file)\n"
    "\n"
    "Example: figma://node/KqD1Flt6R0C7aC35bBp7gG/1:2\n"
    "Example: KqD1Flt6R0C7aC35bBp7gG/1:2\n"
    "Example: 1:2 (with active file set)"
)

FILE_ADDRESS_HELP = (
    "Valid URI formats:\n"
    "1. figma://file/{fileKey}\n"
    "2. {fileKey} (direct file key)\n"
    "\n"
    "Example: figma://file/KqD1Flt6R0C7aC35bBp7gG\n"
    "Example: KqD1Flt6R0C7aC35bBp7gG"
)


@dataclass(frozen=True)
class QualifiedAddress:
    file_key: str
    node_id: str


@dataclass(frozen=True)
class ShortAddress:
    file_key: str
    node_id: str


@dataclass(frozen=True)
class BareId:
    node_id: str


ParsedAddress = QualifiedAddress | ShortAddress | BareId


@dataclass(frozen=True)
class NodeAddress:
    file_key: str
    node_id: str

    @property
    def uri(self) -> str:
        return node_uri(self.file_key, self.node_id)


def node_uri(file_key: str, node_id: str) -> str:
    return f"{SCHEME}node/{file_key}/{node_id}"


def file_uri(file_key: str) -> str:
    return f"{SCHEME}file/{file_key}"


def _malformed(text: str, reason: str) -> MalformedAddressError:
    return MalformedAddressError(f"{reason}: {text!r}", {"address": text, "help": ADDRESS_HELP})


def parse_node_address(text: str) -> ParsedAddress:
    if not text:
        raise _malformed(text, "Node URI is required")

    if text.startswith(SCHEME):
        match = _QUALIFIED_NODE.match(text)
        if match is None:
            raise _malformed(text, "Invalid node URI format, expected figma://node/{fileKey}/{nodeId}")
        return QualifiedAddress(file_key=match.group(1), node_id=match.group(2))

    if "/" in text:
        file_key, node_id = text.split("/", 1)
        if not file_key or not node_id:
            raise _malformed(text, "Could not extract fileKey and nodeId from URI")
        return ShortAddress(file_key=file_key, node_id=node_id)

    return BareId(node_id=text)


def resolve_parsed_address(parsed: ParsedAddress, active_file_key: str | None) -> NodeAddress:
    """Turn any parsed shape into a concrete (file, node) pair."""
    if isinstance(parsed, BareId):
        if not active_file_key:
            raise MalformedAddressError(
                f"No active Figma file to resolve node id {parsed.node_id!r}; "
                "set an active file first using set_active_figma_file",
                {"address": parsed.node_id, "help": ADDRESS_HELP},
            )
        return NodeAddress(file_key=active_file_key, node_id=parsed.node_id)
    return NodeAddress(file_key=parsed.file_key, node_id=parsed.node_id)


async def resolve_node_address(ctx: DesignContext, text: str) -> NodeAddress:
    parsed = parse_node_address(text)
    active_key: str | None = None
    if isinstance(parsed, BareId):
        logger.debug("Treating as node ID only: %s", text)
        active = await resolve_active_file(ctx)
        active_key = active.key if active else None
    address = resolve_parsed_address(parsed, active_key)
    logger.debug("Parsed URI: fileKey=%s, nodeId=%s", address.file_key, address.node_id)
    return address


def parse_file_address(text: str) -> str:
    """Return the file key from ``figma://file/{key}`` or a bare key."""
    if not text:
        raise MalformedAddressError("File URI is required", {"address": text, "help": FILE_ADDRESS_HELP})
    if text.startswith(SCHEME):
        match = _QUALIFIED_FILE.match(text)
        if match is None:
            raise MalformedAddressError(
                f"Invalid file URI format, expected figma://file/{{fileKey}}: {text!r}",
                {"address": text, "help": FILE_ADDRESS_HELP},
            )
        return match.group(1)
    return text
