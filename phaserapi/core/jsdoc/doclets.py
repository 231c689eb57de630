"""Doclet → PhaserJSDoc model building.

A doclet is one JSDoc record as emitted by `jsdoc -X`: a dict with
`kind`, `name`, `longname`, `memberof`, `scope`, and optional `params`,
`returns`, `type` and `augments`. The source scanner produces dicts of
the same shape, so both inputs share this builder.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Set

from .models import (
    PhaserConstant,
    PhaserJSDoc,
    PhaserMethod,
    PhaserType,
    PhaserVariable,
)
from .type_expr import normalize_type_names

logger = logging.getLogger(__name__)

# Namespace that owns global constants (Phaser.AUTO, Phaser.WEBGL, ...)
GLOBAL_NAMESPACE = "Phaser"

_SKIP_FLAGS = ("undocumented", "ignore", "inherited")


def _should_skip(doclet: Dict[str, Any]) -> bool:
    if doclet.get("access") == "private":
        return True
    return any(doclet.get(flag) for flag in _SKIP_FLAGS)


def _type_names(type_block: Optional[Dict[str, Any]]) -> List[str]:
    """Pull normalized type names out of a `{"names": [...]}` block."""
    if not isinstance(type_block, dict):
        return []
    names = type_block.get("names") or []
    return normalize_type_names(n for n in names if isinstance(n, str))


def _params(doclet: Dict[str, Any]) -> List[PhaserVariable]:
    params = []
    for param in doclet.get("params") or []:
        if not isinstance(param, dict):
            continue
        name = param.get("name") or ""
        # Nested option fields ("config.x") describe a single positional arg
        if "." in name:
            continue
        params.append(PhaserVariable(name=name, types=_type_names(param.get("type"))))
    return params


def _return_types(doclet: Dict[str, Any]) -> List[str]:
    types: List[str] = []
    for ret in doclet.get("returns") or []:
        if isinstance(ret, dict):
            types.extend(_type_names(ret.get("type")))
    return types


def _normalize_memberof(memberof: Optional[str]) -> Optional[str]:
    if not memberof:
        return None
    memberof = memberof.rstrip("!")
    if memberof.endswith(".prototype"):
        memberof = memberof[: -len(".prototype")]
    return memberof


class _TypeSections:
    """Per-type bookkeeping so each member name is recorded once."""

    def __init__(self):
        self.constants: Set[str] = set()
        self.properties: Set[str] = set()
        self.methods: Set[str] = set()


def build_model(doclets: Iterable[Dict[str, Any]]) -> PhaserJSDoc:
    """Build a PhaserJSDoc from doclets.

    Classes are collected first so members documented before their class
    still attach to it. Malformed doclets are skipped, never raised.

    Args:
        doclets: Iterable of doclet dicts

    Returns:
        PhaserJSDoc with types in first-encountered order
    """
    doclets = [d for d in doclets if isinstance(d, dict)]

    types: List[PhaserType] = []
    types_map: Dict[str, PhaserType] = {}
    sections: Dict[str, _TypeSections] = {}

    for doclet in doclets:
        if doclet.get("kind") != "class" or _should_skip(doclet):
            continue
        name = doclet.get("longname") or doclet.get("name")
        if not name or name in types_map:
            continue

        augments = [a for a in (doclet.get("augments") or []) if isinstance(a, str)]
        phaser_type = PhaserType(
            name=name,
            extends=augments or None,
            constructor_args=_params(doclet),
        )
        types.append(phaser_type)
        types_map[name] = phaser_type
        sections[name] = _TypeSections()

    global_constants: List[PhaserConstant] = []
    global_names: Set[str] = set()
    skipped = 0

    for doclet in doclets:
        kind = doclet.get("kind")
        if kind not in ("member", "constant", "function") or _should_skip(doclet):
            continue

        name = doclet.get("name")
        memberof = _normalize_memberof(doclet.get("memberof"))
        if not name or not memberof:
            skipped += 1
            continue

        scope = doclet.get("scope")
        owner = types_map.get(memberof)

        if owner is None:
            is_constant = kind == "constant" or (kind == "member" and scope == "static")
            if memberof == GLOBAL_NAMESPACE and is_constant:
                if name not in global_names:
                    global_names.add(name)
                    global_constants.append(
                        PhaserConstant(name=name, types=_type_names(doclet.get("type")))
                    )
            else:
                logger.debug(f"Skipping {kind} {name}: owner {memberof} is not a class")
                skipped += 1
            continue

        seen = sections[memberof]

        if kind == "function":
            if name in seen.methods:
                continue
            seen.methods.add(name)
            owner.methods.append(PhaserMethod(
                name=name,
                args=_params(doclet),
                return_types=_return_types(doclet),
            ))
        elif kind == "constant" or scope == "static":
            if name in seen.constants:
                continue
            seen.constants.add(name)
            owner.constants.append(PhaserVariable(name=name, types=_type_names(doclet.get("type"))))
        else:
            if name in seen.properties:
                continue
            seen.properties.add(name)
            owner.properties.append(PhaserVariable(name=name, types=_type_names(doclet.get("type"))))

    logger.info(
        f"Built JSDoc model: {len(types)} types, "
        f"{len(global_constants)} global constants ({skipped} doclets skipped)"
    )
    return PhaserJSDoc(types=types, global_constants=global_constants, types_map=types_map)
