"""Conversion of tool input models into function-calling schemas.

Pydantic emits JSON Schema with ``$defs``/``$ref`` indirection and
``anyOf: [..., {"type": "null"}]`` for optional fields (older releases also
wrap described references in a single-item ``allOf``). Ollama's tool schema
only keeps a flat subset (type, description, enum, items per property), so
references are inlined and nullable unions collapsed to their underlying type.
"""

from typing import Any

from pydantic import BaseModel

_DROPPED_KEYS = {"title", "default", "$defs"}


def _ref_name(ref: str) -> str:
    return ref.rsplit("/", 1)[-1]


def _simplify(node: Any, defs: dict[str, Any]) -> Any:
    """Recursively inline references and collapse nullable unions."""
    if isinstance(node, list):
        return [_simplify(item, defs) for item in node]
    if not isinstance(node, dict):
        return node

    if "$ref" in node:
        target = defs.get(_ref_name(node["$ref"]), {})
        merged = {**target, **{k: v for k, v in node.items() if k != "$ref"}}
        return _simplify(merged, defs)

    for combinator in ("anyOf", "allOf"):
        if combinator not in node:
            continue
        options = [opt for opt in node[combinator] if opt.get("type") != "null"]
        if len(options) == 1:
            rest = {k: v for k, v in node.items() if k != combinator}
            return _simplify({**options[0], **rest}, defs)

    return {
        key: _simplify(value, defs)
        for key, value in node.items()
        if key not in _DROPPED_KEYS
    }


def model_to_parameters(model: type[BaseModel]) -> dict[str, Any]:
    """Build the ``parameters`` object for a tool from its input model.

    Args:
        model: The tool's input model class

    Returns:
        dict: A self-contained JSON Schema object (no ``$ref``)
    """
    schema = model.model_json_schema(by_alias=True)
    defs = schema.get("$defs", {})
    parameters = _simplify(schema, defs)
    parameters.setdefault("type", "object")
    parameters.setdefault("properties", {})
    parameters.setdefault("required", [])
    return parameters


def to_function_schema(name: str, description: str, model: type[BaseModel]) -> dict[str, Any]:
    """Build a complete function-calling tool entry.

    Returns:
        dict: ``{"type": "function", "function": {name, description, parameters}}``
    """
    return {
        "type": "function",
        "function": {
            "name": name,
            "description": description,
            "parameters": model_to_parameters(model),
        },
    }
