"""Phaser API stub generator.

Public API:
    build_phaser_api(model, supplemental_path, output_path) → BuildResult
    generate_api_source(model, supplemental_text) → str
    variable_type_name(model, types) / decl_expression(type_id)
    sort_types(types)
"""

from .builder import BuildResult, build_phaser_api, generate_api_source
from .emitter import ApiEmitter, emit_api
from .names import (
    decl_expression,
    method_type_name,
    type_name,
    valid_name,
    variable_type_name,
)
from .ordering import referenced_types, sort_type, sort_types

__all__ = [
    "ApiEmitter",
    "BuildResult",
    "build_phaser_api",
    "decl_expression",
    "emit_api",
    "generate_api_source",
    "method_type_name",
    "referenced_types",
    "sort_type",
    "sort_types",
    "type_name",
    "valid_name",
    "variable_type_name",
]
