"""XML serialization for recorded node trees.

Renders what a RecordingBuilder was asked to build:
Tags are element names (component refs use their name).
Props become attributes; names that are not valid XML names are dropped.
Bound events are listed in an `events` attribute.
A `val()` value becomes the `value` attribute.
Child nodes become nested elements; other children become text content.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, List
from xml.sax.saxutils import escape

from substance_jsx.recording import RecordedNode

logger = logging.getLogger(__name__)

XML_NAME_PATTERN = re.compile(r"^[A-Za-z_:][A-Za-z0-9_.:-]*$")

_ATTR_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def serialize_to_xml(node: Any) -> str:
    """Convert a recorded node tree to readable XML.

    Args:
        node: The root node to serialize

    Returns:
        XML string representation of the node tree
    """
    if node is None:
        return ""

    return "\n".join(_node_lines(node, 0))


def _node_lines(node: Any, depth: int) -> List[str]:
    """Lines for one node, indented two spaces per level below the root."""
    pad = "  " * depth

    if not isinstance(node, RecordedNode):
        return [pad + escape(str(node))]

    open_tag = f"{node.tag}{_serialize_props(node)}"
    children = [child for child in node.children if child is not None]

    if not children:
        return [f"{pad}<{open_tag} />"]

    if any(not isinstance(child, RecordedNode) for child in children):
        # mixed or text content stays on one line
        inline = "".join(
            "".join(line.strip() for line in _node_lines(child, 0))
            if isinstance(child, RecordedNode) else escape(str(child))
            for child in children
        )
        return [f"{pad}<{open_tag}>{inline}</{node.tag}>"]

    lines = [f"{pad}<{open_tag}>"]
    for child in children:
        lines.extend(_node_lines(child, depth + 1))
    lines.append(f"{pad}</{node.tag}>")
    return lines


def _serialize_props(node: RecordedNode) -> str:
    """Serialize props, `val()` value and bound events to XML attributes."""
    attrs = []

    for prop_name, value in node.props.items():
        if value is None or callable(value):
            continue
        if not isinstance(prop_name, str) or not XML_NAME_PATTERN.match(prop_name):
            logger.debug("Dropping prop %r from <%s>: not an XML name", prop_name, node.tag)
            continue
        attrs.append(_attribute(prop_name, value))

    if node.has_value and "value" not in node.props:
        attrs.append(_attribute("value", node.value))

    if node.handlers:
        attrs.append(_attribute("events", ",".join(node.event_names)))

    return "".join(attrs)


def _attribute(name: str, value: Any) -> str:
    return f' {name}="{escape(_serialize_prop_value(value), _ATTR_ENTITIES)}"'


def _serialize_prop_value(value: Any) -> str:
    """Serialize a property value to string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        try:
            return json.dumps(value)
        except (TypeError, ValueError):
            return "[Object (circular or non-serializable)]"
    return str(value)


__all__ = ["serialize_to_xml"]
