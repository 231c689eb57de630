"""Shared constants for the Phaser API generator.

This module contains constants that are used across multiple modules
to avoid duplication and ensure consistency.
"""

# =============================================================================
# Default Workspace Layout
# =============================================================================

# Plugin project holding the Phaser sources and the generated API
DEFAULT_RESOURCES_PROJECT = "phasereditor.resources.phaser"

# Paths relative to the resources project
DEFAULT_SRC_PATH = "phaser-master/src"
DEFAULT_DOCS_JSON_PATH = "phaser-custom/jsdoc/docs.json"
DEFAULT_SUPPLEMENTAL_PATH = "phaser-custom/api/phaser-api-concat.js"
DEFAULT_OUTPUT_PATH = "phaser-custom/api/phaser-api.js"

# =============================================================================
# Generator
# =============================================================================

# Types with a hand-written stub block instead of a generated one
DEFAULT_IGNORE_TYPES = ["Phaser.Easing"]

# Prefix marking an array-literal type expression: "[new Phaser_Sprite()]"
ARRAY_LITERAL_PREFIX = "[new"

# Return type of methods that document no return value
VOID_TYPE = "void"

# JSDoc primitive names → script constructor identifiers
PRIMITIVE_ALIASES = {
    "string": "String",
    "integer": "Number",
    "number": "Number",
    "boolean": "Boolean",
    "object": "Object",
    "any": "Object",
    "array": "Array",
    "function": "Function",
}

# Array element types remapped before building "[new X()]"
ARRAY_ELEMENT_PATCHES = {
    "DisplayObject": "PIXI_DisplayObject",
}

# Namespaces tried, in order, when a type token lacks one ("Point" → Phaser.Point)
NAMESPACE_FALLBACKS = ["Phaser", "PIXI"]

# Reserved words that cannot be used as generated identifiers
RESERVED_WORDS = frozenset({"if"})

# Placeholder for names with nothing usable left after sanitizing
PLACEHOLDER_NAME = "guess"

# Literal defaults for primitive property/constant initializers
PRIMITIVE_DEFAULTS = {
    "Boolean": "true",
    "Number": "0",
    "String": '""',
}

# =============================================================================
# Easing Block
# =============================================================================

EASING_FAMILIES = [
    "Quadratic",
    "Cubic",
    "Quartic",
    "Quintic",
    "Sinusoidal",
    "Exponential",
    "Circular",
    "Elastic",
    "Back",
    "Bounce",
]

EASING_VARIANTS = ["In", "Out", "InOut"]

EASING_ALIASES = [
    ("Default", "Linear.None"),
    ("Power0", "Linear.None"),
    ("Power1", "Quadratic.Out"),
    ("Power2", "Cubic.Out"),
    ("Power3", "Quartic.Out"),
    ("Power4", "Quintic.Out"),
]
