"""Phaser API build driver.

Orders the model's types, emits the stub source, appends the hand-maintained
supplemental script and writes the result. The whole output is assembled in
memory first; any I/O failure aborts the build without retry.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from ..errors import BuildError
from ..jsdoc.models import PhaserJSDoc
from .emitter import emit_api
from .ordering import sort_types

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a successful build."""

    output_path: Path
    text: str
    type_count: int

    @property
    def size_kb(self) -> int:
        return len(self.text) // 1024

    def summary(self) -> str:
        return f"{self.size_kb}kb"


def generate_api_source(
    model: PhaserJSDoc,
    supplemental_text: str = "",
    ignore_types: Optional[Iterable[str]] = None,
) -> str:
    """Generate the complete stub source without touching the filesystem."""
    types = sort_types(model.types)
    return emit_api(model, types, ignore_types) + supplemental_text


def read_supplemental(path) -> str:
    """Read the supplemental script.

    Bytes that are not valid UTF-8 are carried through as surrogate escapes,
    so `write_output` reproduces them unchanged.

    Raises:
        BuildError: If the file cannot be read
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            return f.read()
    except OSError as e:
        raise BuildError(f"Cannot read supplemental script {path}: {e}", path=path) from e


def write_output(path, text: str) -> None:
    """Write (overwrite) the generated stub file.

    Raises:
        BuildError: If the file cannot be written
    """
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            f.write(text)
    except OSError as e:
        raise BuildError(f"Cannot write output {path}: {e}", path=path) from e
    except UnicodeEncodeError as e:
        raise BuildError(f"Cannot encode output {path}: {e}", path=path) from e


def build_phaser_api(
    model: PhaserJSDoc,
    supplemental_path,
    output_path,
    ignore_types: Optional[Iterable[str]] = None,
) -> BuildResult:
    """Build the Phaser API stub file.

    Args:
        model: Loaded JSDoc model (read-only)
        supplemental_path: Hand-written script appended verbatim
        output_path: Destination, overwritten on every run
        ignore_types: Types to leave to hand-written stubs (default: Phaser.Easing)

    Returns:
        BuildResult with the generated text and its size

    Raises:
        BuildError: On any read or write failure
    """
    supplemental_text = read_supplemental(supplemental_path)
    text = generate_api_source(model, supplemental_text, ignore_types)

    write_output(output_path, text)
    logger.info(f"Wrote {len(model.types)} types to {output_path}")

    return BuildResult(output_path=Path(output_path), text=text, type_count=len(model.types))
