"""Type-name resolution and declaration expressions.

Maps JSDoc type tokens to identifiers usable in the generated script.
Every function here is total: malformed or unknown tokens degrade to a
sanitized identifier, never an exception.
"""

from typing import Sequence

from ..constants import (
    ARRAY_ELEMENT_PATCHES,
    ARRAY_LITERAL_PREFIX,
    NAMESPACE_FALLBACKS,
    PLACEHOLDER_NAME,
    PRIMITIVE_ALIASES,
    PRIMITIVE_DEFAULTS,
    RESERVED_WORDS,
    VOID_TYPE,
)
from ..jsdoc.models import PhaserJSDoc, PhaserType


def valid_name(name: str) -> str:
    """Replace every non-identifier character with `_`.

    e.g. "x-offset" -> "x_offset", "" -> "guess", "if" -> "_if"
    """
    valid = "".join(c if (c.isalnum() or c in "_$") else "_" for c in name)
    if not valid:
        valid = PLACEHOLDER_NAME
    if valid in RESERVED_WORDS:
        return "_" + valid
    return valid


def type_name(model: PhaserJSDoc, name: str) -> str:
    """Synthetic identifier for a type name.

    Names missing their namespace ("Point") are looked up under
    Phaser, then PIXI.
    """
    if not model.has_type(name):
        for namespace in NAMESPACE_FALLBACKS:
            if model.has_type(f"{namespace}.{name}"):
                return valid_name(f"{namespace}_{name}".replace(".", "_"))
    return valid_name(name.replace(".", "_"))


def type_name_of(model: PhaserJSDoc, phaser_type: PhaserType) -> str:
    return type_name(model, phaser_type.name)


def _element_type_name(model: PhaserJSDoc, name: str) -> str:
    if name in ARRAY_ELEMENT_PATCHES:
        return ARRAY_ELEMENT_PATCHES[name]
    if name.lower().startswith("array"):
        return "Array"
    if name in PRIMITIVE_ALIASES:
        return PRIMITIVE_ALIASES[name]
    return type_name(model, name)


def variable_type_name(model: PhaserJSDoc, types: Sequence[str]) -> str:
    """Identifier for a variable's declared type; only the first token counts.

    Returns either an identifier ("Phaser_Sprite", "Number") or an
    array-literal expression ("[new Phaser_Sprite()]") for `Array(T)`.
    """
    if not types:
        return "Object"
    name = types[0]

    if name.startswith("Array(") and name.endswith(")"):
        elem = _element_type_name(model, name[len("Array("):-1])
        return f"{ARRAY_LITERAL_PREFIX} {elem}()]"

    if name.lower().startswith("array"):
        return "Array"

    if name in PRIMITIVE_ALIASES:
        return PRIMITIVE_ALIASES[name]

    return type_name(model, name)


def method_type_name(model: PhaserJSDoc, types: Sequence[str]) -> str:
    """Identifier for a method's return type, `void` when none is documented."""
    if not types:
        return VOID_TYPE
    return variable_type_name(model, types)


def decl_expression(type_id: str) -> str:
    """Initializer expression for a property or constant of the given type.

    e.g. "Boolean" -> "true", "Phaser_Group" -> "new Phaser_Group()"
    """
    if type_id in PRIMITIVE_DEFAULTS:
        return PRIMITIVE_DEFAULTS[type_id]

    # Array(T) already resolved to "[new T()]"
    if type_id.startswith(ARRAY_LITERAL_PREFIX):
        return type_id

    return f"new {type_id}()"


def is_array_literal(type_id: str) -> bool:
    return type_id.startswith(ARRAY_LITERAL_PREFIX)
