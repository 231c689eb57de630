"""JSDoc model data structures.

Typed records for the Phaser/PIXI API surface parsed from JSDoc output.
These are pure data containers with no parsing logic. The generator treats
a loaded model as read-only.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class PhaserVariable:
    """A named value with declared type tokens (param, property or constant).

    A field may be documented as a union; only the first token is used
    for stub emission.
    """

    name: str
    types: List[str] = field(default_factory=list)


@dataclass
class PhaserMethod:
    """A method documented on a type."""

    name: str
    args: List[PhaserVariable] = field(default_factory=list)
    return_types: List[str] = field(default_factory=list)


@dataclass
class PhaserConstant:
    """A global constant, not scoped to any type (e.g. Phaser.AUTO)."""

    name: str
    types: List[str] = field(default_factory=list)


@dataclass
class PhaserType:
    """A documented class, keyed by its dotted name ("Phaser.Sprite")."""

    name: str
    extends: Optional[List[str]] = None
    constructor_args: List[PhaserVariable] = field(default_factory=list)
    constants: List[PhaserVariable] = field(default_factory=list)
    properties: List[PhaserVariable] = field(default_factory=list)
    methods: List[PhaserMethod] = field(default_factory=list)


@dataclass
class PhaserJSDoc:
    """The complete model: all types, a name lookup, and global constants."""

    types: List[PhaserType] = field(default_factory=list)
    global_constants: List[PhaserConstant] = field(default_factory=list)
    types_map: Dict[str, PhaserType] = field(default_factory=dict)

    def __post_init__(self):
        if not self.types_map:
            self.types_map = {t.name: t for t in self.types}

    def get_type(self, name: str) -> Optional[PhaserType]:
        return self.types_map.get(name)

    def has_type(self, name: str) -> bool:
        return name in self.types_map

    @classmethod
    def load(cls, src_dir=None, docs_json=None) -> "PhaserJSDoc":
        """Load the model from a jsdoc JSON dump or, failing that, a source tree.

        Args:
            src_dir: Directory of Phaser/PIXI JavaScript sources
            docs_json: Path to `jsdoc -X` output

        Returns:
            Populated PhaserJSDoc

        Raises:
            ModelLoadError: If neither input exists or the JSON is unreadable
        """
        from .loader import load_model
        return load_model(src_dir=src_dir, docs_json=docs_json)
