# Lazy imports so `from phaserapi.core.build.names import ...` does not pull
# in tree-sitter (only the source scanner needs it).

__all__ = [
    "PhaserJSDoc",
    "load_model",
    "build_phaser_api",
    "generate_api_source",
    "get_settings",
    "PhaserApiError",
]

_IMPORT_MAP = {
    "PhaserJSDoc": ".jsdoc",
    "load_model": ".jsdoc",
    "build_phaser_api": ".build",
    "generate_api_source": ".build",
    "get_settings": ".config",
    "PhaserApiError": ".errors",
}


def __getattr__(name):
    if name in _IMPORT_MAP:
        import importlib
        module = importlib.import_module(_IMPORT_MAP[name], __package__)
        return getattr(module, name)
    raise AttributeError(f"module 'phaserapi.core' has no attribute {name}")
