import argparse
import logging
import sys
from pathlib import Path

from .core.build import build_phaser_api
from .core.config import load_settings
from .core.errors import PhaserApiError
from .core.jsdoc import load_model


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # Reduce noise from third-party libraries
    logging.getLogger("tree_sitter").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Main entry point: build phaser-api.js from the Phaser JSDoc."""
    parser = argparse.ArgumentParser(description="Phaser API stub generator")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to phaserapi.yaml (default: config/phaserapi.yaml)"
    )
    parser.add_argument(
        "--workspace",
        type=Path,
        default=None,
        help="Workspace holding the resources project (default: parent of the current directory)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    args = parser.parse_args(argv)

    setup_logging(args.log_level or "INFO")

    try:
        settings = load_settings(args.config, workspace=args.workspace)
    except PhaserApiError as e:
        logger.error(str(e))
        return 1

    if not args.log_level:
        logging.getLogger().setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.info(f"Building Phaser API in {settings.project_path}")

    try:
        model = load_model(src_dir=settings.src_path, docs_json=settings.docs_json_path)
        result = build_phaser_api(
            model,
            supplemental_path=settings.supplemental_path,
            output_path=settings.output_path,
            ignore_types=settings.ignore_types,
        )
    except PhaserApiError as e:
        logger.error(f"Build aborted: {e}")
        return 1

    print(result.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
