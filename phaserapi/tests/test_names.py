"""Tests for type-name resolution and declaration expressions."""

import re

import pytest
from phaserapi.core.build.names import (
    decl_expression,
    method_type_name,
    type_name,
    valid_name,
    variable_type_name,
)
from phaserapi.core.jsdoc.models import PhaserJSDoc, PhaserType


IDENTIFIER_RE = re.compile(r"^[A-Za-z0-9_$]+$")
ARRAY_LITERAL_RE = re.compile(r"^\[new [A-Za-z0-9_$]+\(\)\]$")


@pytest.fixture
def model():
    return PhaserJSDoc(types=[
        PhaserType(name="Phaser.Sprite"),
        PhaserType(name="Phaser.Group"),
        PhaserType(name="Phaser.Point"),
        PhaserType(name="PIXI.Texture"),
        PhaserType(name="PIXI.DisplayObject"),
    ])


# =========================================================================
# Tests: valid_name
# =========================================================================

class TestValidName:
    def test_keeps_identifier_characters(self):
        assert valid_name("alpha_2$") == "alpha_2$"

    def test_replaces_invalid_characters(self):
        assert valid_name("x-offset") == "x_offset"
        assert valid_name("a.b c") == "a_b_c"

    def test_empty_becomes_placeholder(self):
        assert valid_name("") == "guess"

    def test_reserved_keyword(self):
        assert valid_name("if") == "_if"


# =========================================================================
# Tests: type_name
# =========================================================================

class TestTypeName:
    def test_known_type(self, model):
        assert type_name(model, "Phaser.Sprite") == "Phaser_Sprite"

    def test_missing_namespace_resolves_to_phaser(self, model):
        assert type_name(model, "Point") == "Phaser_Point"

    def test_missing_namespace_resolves_to_pixi(self, model):
        assert type_name(model, "Texture") == "PIXI_Texture"

    def test_unknown_type_is_sanitized(self, model):
        assert type_name(model, "Some.Thing<T>") == "Some_Thing_T_"


# =========================================================================
# Tests: variable_type_name
# =========================================================================

class TestVariableTypeName:
    @pytest.mark.parametrize("token,expected", [
        ("integer", "Number"),
        ("number", "Number"),
        ("boolean", "Boolean"),
        ("string", "String"),
        ("object", "Object"),
        ("any", "Object"),
        ("array", "Array"),
        ("function", "Function"),
    ])
    def test_primitive_aliases(self, model, token, expected):
        assert variable_type_name(model, [token]) == expected

    def test_array_prefix_is_case_insensitive(self, model):
        assert variable_type_name(model, ["Array"]) == "Array"
        assert variable_type_name(model, ["ArrayBuffer"]) == "Array"

    def test_empty_types_is_object(self, model):
        assert variable_type_name(model, []) == "Object"

    def test_only_first_token_counts(self, model):
        assert variable_type_name(model, ["boolean", "Phaser.Sprite"]) == "Boolean"

    def test_array_of_display_object_patch(self, model):
        assert variable_type_name(model, ["Array(DisplayObject)"]) == "[new PIXI_DisplayObject()]"

    def test_array_of_known_type(self, model):
        assert variable_type_name(model, ["Array(Sprite)"]) == "[new Phaser_Sprite()]"

    def test_array_of_primitive(self, model):
        assert variable_type_name(model, ["Array(number)"]) == "[new Number()]"

    def test_namespaced_type(self, model):
        assert variable_type_name(model, ["Phaser.Group"]) == "Phaser_Group"

    @pytest.mark.parametrize("token", [
        "", "if", "???", "Array(", "Array()", "{a:1}", "Phaser.", ".", "Array(if)", "function(a, b)",
    ])
    def test_never_raises_and_always_valid(self, model, token):
        result = variable_type_name(model, [token])
        assert result
        assert result != "if"
        assert IDENTIFIER_RE.match(result) or ARRAY_LITERAL_RE.match(result)

    def test_dotted_short_name_falls_back_to_valid_identifier(self):
        model = PhaserJSDoc(types=[PhaserType(name="Phaser.Physics.Arcade.Body")])
        assert type_name(model, "Physics.Arcade.Body") == "Phaser_Physics_Arcade_Body"
        assert variable_type_name(model, ["Physics.Arcade.Body"]) == "Phaser_Physics_Arcade_Body"
        assert variable_type_name(model, ["Array(Physics.Arcade.Body)"]) == "[new Phaser_Physics_Arcade_Body()]"


class TestMethodTypeName:
    def test_no_return_is_void(self, model):
        assert method_type_name(model, []) == "void"

    def test_return_type_resolved(self, model):
        assert method_type_name(model, ["Phaser.Sprite"]) == "Phaser_Sprite"


# =========================================================================
# Tests: decl_expression
# =========================================================================

class TestDeclExpression:
    def test_primitive_defaults(self):
        assert decl_expression("Boolean") == "true"
        assert decl_expression("Number") == "0"
        assert decl_expression("String") == '""'

    def test_array_literal_passthrough(self):
        assert decl_expression("[new Phaser_Sprite()]") == "[new Phaser_Sprite()]"

    def test_constructor_call(self):
        assert decl_expression("Phaser_Group") == "new Phaser_Group()"
        assert decl_expression("Object") == "new Object()"
