"""Dependency-biased type ordering.

PIXI types go first; a type whose surface mentions another type's name
is pushed after it. This is a brute swap pass over a non-transitive
comparison, not a topological sort: cycles and partial references may
leave forward references in the output. Downstream output must match
this exact weighting.
"""

from typing import List, Sequence

from ..jsdoc.models import PhaserType

# Weight added to a type that references the other one
REFERENCE_BIAS = 10


def referenced_types(phaser_type: PhaserType) -> str:
    """Text of every type name the type's emitted surface mentions.

    Covers the base classes, property and constant types, and method
    return types. Matching against it is textual, so "Phaser.Point" also
    matches inside "Phaser.PointSomething".
    """
    parts: List[str] = []
    if phaser_type.extends:
        parts.extend(phaser_type.extends)
    for var in phaser_type.properties:
        parts.extend(var.types)
    for var in phaser_type.constants:
        parts.extend(var.types)
    for method in phaser_type.methods:
        parts.extend(method.return_types)
    return " ".join(parts)


def sort_type(a: PhaserType, b: PhaserType) -> int:
    """Positive when `a` should come after `b`."""
    a1 = 0 if a.name.startswith("PIXI") else 1
    b1 = 0 if b.name.startswith("PIXI") else 1

    if b.name in referenced_types(a):
        a1 += REFERENCE_BIAS

    if a.name in referenced_types(b):
        b1 += REFERENCE_BIAS

    return a1 - b1


def sort_types(types: Sequence[PhaserType]) -> List[PhaserType]:
    """Order types with the swap pass; returns a new list."""
    ordered = list(types)
    n = len(ordered)
    for i in range(n - 1):
        for j in range(i + 1, n):
            if sort_type(ordered[i], ordered[j]) > 0:
                ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered
