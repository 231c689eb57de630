"""JSDoc model of the Phaser/PIXI API.

Public API:
    load_model(src_dir, docs_json) → PhaserJSDoc
    build_model(doclets) → PhaserJSDoc
    load_doclets_json(path) → list of doclet dicts
"""

from .doclets import build_model
from .loader import load_doclets_json, load_model, load_model_from_source
from .models import (
    PhaserConstant,
    PhaserJSDoc,
    PhaserMethod,
    PhaserType,
    PhaserVariable,
)
from .type_expr import normalize_type_name, normalize_type_names

__all__ = [
    "build_model",
    "load_doclets_json",
    "load_model",
    "load_model_from_source",
    "normalize_type_name",
    "normalize_type_names",
    "PhaserConstant",
    "PhaserJSDoc",
    "PhaserMethod",
    "PhaserType",
    "PhaserVariable",
]
