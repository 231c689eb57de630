"""JSDoc model loading.

Two inputs produce the same doclet shape:
  1. `jsdoc -X` JSON output (preferred when present)
  2. A Phaser source tree, scanned with tree-sitter
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..errors import ModelLoadError
from .doclets import build_model
from .models import PhaserJSDoc

logger = logging.getLogger(__name__)


def load_doclets_json(path) -> List[Dict[str, Any]]:
    """Read a `jsdoc -X` dump.

    Accepts either the bare doclet array or an object with a `docs` array.

    Raises:
        ModelLoadError: If the file cannot be read or is not a doclet array
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ModelLoadError(f"Cannot read JSDoc JSON {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ModelLoadError(f"Invalid JSDoc JSON {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ModelLoadError(f"JSDoc JSON {path} is not valid UTF-8: {e}") from e

    if isinstance(data, dict):
        data = data.get("docs")
    if not isinstance(data, list):
        raise ModelLoadError(f"JSDoc JSON {path} does not contain a doclet array")

    logger.info(f"Loaded {len(data)} doclets from {path}")
    return data


def load_model(src_dir=None, docs_json=None) -> PhaserJSDoc:
    """Load the PhaserJSDoc model.

    Args:
        src_dir: Directory of JavaScript sources to scan
        docs_json: Path to `jsdoc -X` output

    Returns:
        PhaserJSDoc built from whichever input is available

    Raises:
        ModelLoadError: If neither input exists
    """
    if docs_json is not None and Path(docs_json).is_file():
        return build_model(load_doclets_json(docs_json))

    if src_dir is not None and Path(src_dir).is_dir():
        if docs_json is not None:
            logger.info(f"{docs_json} not found, scanning sources in {src_dir}")
        from .scanner import scan_source_tree
        return build_model(scan_source_tree(str(src_dir)))

    raise ModelLoadError(
        f"No JSDoc input found (docs_json={docs_json}, src_dir={src_dir})"
    )


def load_model_from_source(source_text: str, file_path: str = "<source>") -> PhaserJSDoc:
    """Build a model from a single JavaScript source string."""
    from .scanner import JSDocScanner
    return build_model(JSDocScanner().scan_source(source_text, file_path))

