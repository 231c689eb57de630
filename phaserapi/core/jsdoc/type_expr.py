"""JSDoc type expression normalization.

Phaser's JSDoc spells array types several ways (`Array.<Sprite>`,
`Array<Sprite>`, `Sprite[]`). The model stores a single spelling,
`Array(Sprite)`, which is what the stub generator recognizes.
"""

import re
from typing import Iterable, List

_GENERIC_ARRAY_RE = re.compile(r"^Array\.?<(.+)>$")
_OBJECT_MAP_RE = re.compile(r"^Object\.?<.+>$")

_OPEN = "<({["
_CLOSE = ">)}]"


def split_top_level(expr: str, sep: str) -> List[str]:
    """Split on `sep` only where it is not nested in <>, (), {} or [].

    e.g. "Array.<number|string>|null" -> ["Array.<number|string>", "null"]
    """
    parts = []
    depth = 0
    current = []
    for c in expr:
        if c in _OPEN:
            depth += 1
        elif c in _CLOSE and depth > 0:
            depth -= 1
        if c == sep and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(c)
    parts.append("".join(current))
    return parts


def normalize_type_name(name: str) -> str:
    """Normalize one JSDoc type name into the model's spelling.

    Returns an empty string when nothing usable is left.
    """
    name = name.strip()
    while name[:1] in ("?", "!"):
        name = name[1:].strip()
    if name.endswith("="):
        name = name[:-1].strip()
    if name.startswith("(") and name.endswith(")"):
        name = name[1:-1].strip()
    if name.startswith("..."):
        name = name[3:].strip()

    if not name:
        return ""

    m = _GENERIC_ARRAY_RE.match(name)
    if m:
        inner = normalize_type_names([m.group(1)])
        return f"Array({inner[0]})" if inner else "Array"

    if name.endswith("[]"):
        inner = normalize_type_name(name[:-2])
        return f"Array({inner})" if inner else "Array"

    if _OBJECT_MAP_RE.match(name):
        return "Object"

    return name


def normalize_type_names(names: Iterable[str]) -> List[str]:
    """Normalize a list of type names, expanding unions in declaration order."""
    result: List[str] = []
    for raw in names:
        if not raw:
            continue
        raw = raw.strip()
        if raw.startswith("(") and raw.endswith(")"):
            raw = raw[1:-1]
        for part in split_top_level(raw, "|"):
            normalized = normalize_type_name(part)
            if normalized:
                result.append(normalized)
    return result
