"""Phaser API stub emitter.

Writes the synthetic JavaScript API in a fixed section order:

  1. constructor, prototype chain, constants, properties and methods per type
  2. namespace placeholder objects
  3. the hand-written easing block
  4. aliases from dotted names to synthetic identifiers
  5. global constants

The supplemental script is appended by the build driver.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from ..constants import (
    DEFAULT_IGNORE_TYPES,
    EASING_ALIASES,
    EASING_FAMILIES,
    EASING_VARIANTS,
    VOID_TYPE,
)
from ..jsdoc.models import PhaserJSDoc, PhaserType, PhaserVariable
from .names import (
    decl_expression,
    is_array_literal,
    method_type_name,
    type_name,
    type_name_of,
    valid_name,
    variable_type_name,
)

logger = logging.getLogger(__name__)


class ApiEmitter:
    """Emits stub source text for a PhaserJSDoc model.

    The model is only read; all output accumulates in a local buffer.
    """

    def __init__(self, model: PhaserJSDoc, ignore_types: Optional[Iterable[str]] = None):
        self._model = model
        self._ignore = set(DEFAULT_IGNORE_TYPES if ignore_types is None else ignore_types)

    def emit(self, types: Sequence[PhaserType]) -> str:
        """Emit all generated sections for the already-ordered types."""
        out: List[str] = []
        self._emit_types(types, out)
        self._emit_namespaces(types, out)
        self._emit_easing(out)
        self._emit_aliases(types, out)
        self._emit_global_constants(out)
        return "".join(out)

    # =========================================================================
    # Sections
    # =========================================================================

    def _emit_types(self, types: Sequence[PhaserType], out: List[str]):
        for phaser_type in types:
            if phaser_type.name in self._ignore:
                continue
            self._emit_type(phaser_type, out)
            out.append("\n")

    def _emit_type(self, phaser_type: PhaserType, out: List[str]):
        model = self._model
        name = type_name_of(model, phaser_type)

        out.append(f"var {name} = function ({self._params(phaser_type.constructor_args)}) {{}};\n")

        if phaser_type.extends:
            base = "Object"
            if len(phaser_type.extends) == 1:
                base = type_name(model, phaser_type.extends[0])
            out.append(f"{name}.prototype = new {base}();\n")

        for var in phaser_type.constants:
            var_type = variable_type_name(model, var.types)
            out.append(f"{name}.{valid_name(var.name)} = {decl_expression(var_type)};\n")

        for var in phaser_type.properties:
            var_type = variable_type_name(model, var.types)
            out.append(f"{name}.prototype.{valid_name(var.name)} = {decl_expression(var_type)};\n")

        for method in phaser_type.methods:
            return_type = method_type_name(model, method.return_types)
            out.append(f"{name}.prototype.{method.name} = function ({self._params(method.args)}) {{")
            if is_array_literal(return_type):
                out.append(f" return {return_type}; ")
            elif return_type != VOID_TYPE:
                out.append(f" return new {return_type}(); ")
            out.append("};\n")

    def _emit_namespaces(self, types: Sequence[PhaserType], out: List[str]):
        out.append("\n\n")
        seen = set()
        for phaser_type in types:
            if phaser_type.name in self._ignore:
                continue
            elems = phaser_type.name.split(".")
            for i in range(1, len(elems)):
                namespace = ".".join(elems[:i])
                if namespace not in seen:
                    seen.add(namespace)
                    out.append(f"{namespace} = {{}};\n")

    def _emit_easing(self, out: List[str]):
        out.append("\n// easing\n\n")
        out.append("\nPhaser.Easing = {};\n")

        out.append("Phaser.Easing.Linear = {};\n")
        out.append("Phaser.Easing.Linear.None = function (k) { return new Number(); };\n")

        for easing in EASING_FAMILIES:
            out.append(f"Phaser.Easing.{easing} = {{}};\n")
            for variant in EASING_VARIANTS:
                out.append(f"Phaser.Easing.{easing}.{variant} = function (k) {{ return new Number(); }};\n")

        out.append("\n".join(
            f"Phaser_Easing.{alias} = Phaser_Easing.{target};" for alias, target in EASING_ALIASES
        ))

    def _emit_aliases(self, types: Sequence[PhaserType], out: List[str]):
        out.append("\n\n// alias\n\n")
        for phaser_type in types:
            out.append(f"{phaser_type.name} = {type_name_of(self._model, phaser_type)};\n")

    def _emit_global_constants(self, out: List[str]):
        out.append("\n")
        out.append("// Global constants\n")
        out.append("\n")

        for constant in self._model.global_constants:
            var_name = valid_name(constant.name)
            var_type = variable_type_name(self._model, constant.types)

            if var_type == "Object":
                # blendModes / scaleModes: these need hand-written stubs
                logger.debug(f"Skipping Object-typed global constant {constant.name}")
                continue

            out.append(f"Phaser.{var_name} = {var_type};\n")
        out.append("\n")

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _params(args: Sequence[PhaserVariable]) -> str:
        return ", ".join(valid_name(arg.name) for arg in args)


def emit_api(
    model: PhaserJSDoc,
    types: Sequence[PhaserType],
    ignore_types: Optional[Iterable[str]] = None,
) -> str:
    """Emit the generated stub text for ordered types."""
    return ApiEmitter(model, ignore_types).emit(types)
