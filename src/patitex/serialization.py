"""AST serialization: JSON round-trip for patitex AST nodes.

Nodes become JSON-compatible dicts with a ``_type`` discriminator.
SourceLocation and Segment values are tagged the same way, so a MathBlock
keeps its zero-copy segments (and still needs the original source to be
rendered after a round-trip).

Example:
    from patitex import Markdown
    from patitex.serialization import to_json, from_json

    doc = Markdown(plugins=["math"]).parse("$$x+y$$")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure.

"""

import json
from dataclasses import fields
from typing import Any

from patitex.location import SourceLocation
from patitex.nodes import (
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    IndentedCode,
    Math,
    MathBlock,
    Node,
    Paragraph,
    SoftBreak,
    Strong,
    Text,
)
from patitex.segments import Segment

_NODE_TYPES: dict[str, type[Node]] = {
    "Document": Document,
    "Heading": Heading,
    "Paragraph": Paragraph,
    "IndentedCode": IndentedCode,
    "MathBlock": MathBlock,
    "Text": Text,
    "Emphasis": Emphasis,
    "Strong": Strong,
    "CodeSpan": CodeSpan,
    "SoftBreak": SoftBreak,
    "Math": Math,
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a JSON-compatible dict."""
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "offset": value.offset,
            "end_offset": value.end_offset,
            "source_file": value.source_file,
        }
    if isinstance(value, Segment):
        return {
            "_type": "Segment",
            "start": value.start,
            "stop": value.stop,
            "padding": value.padding,
        }
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed AST node from a dict produced by ``to_dict``.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs = {f.name: _deserialize_value(data[f.name]) for f in fields(node_cls) if f.name in data}
    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == "SourceLocation":
            return SourceLocation(
                lineno=value["lineno"],
                col_offset=value["col_offset"],
                offset=value.get("offset", 0),
                end_offset=value.get("end_offset", 0),
                source_file=value.get("source_file"),
            )
        if type_name == "Segment":
            return Segment(value["start"], value["stop"], value.get("padding", 0))
        if type_name is not None:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to JSON with sorted keys."""
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from JSON.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
