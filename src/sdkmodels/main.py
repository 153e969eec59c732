"""Console entry point for sdkmodels."""

import os
import sys
from pathlib import Path
from typing import List, Optional

from .cli import parse_arguments
from .config import ConfigError, load_env_file, load_or_create_config
from .constants import ENV_PROJECT_ROOT
from .core import ExtractionSettings
from .engine import ExtractionEngine
from .formatters import format_registry_tree
from .registry import RegistryCollisionError
from .utils import setup_logger


def resolve_project_root(raw: Optional[str]) -> Path:
    """Resolve the project root from the CLI argument, the environment, or the cwd."""
    return Path(raw or os.environ.get(ENV_PROJECT_ROOT) or ".").resolve()


def list_providers(engine: ExtractionEngine) -> None:
    """Print discovered providers with the declaration file used for each."""
    sources = engine.discover()
    if not sources:
        print("No providers found.")
        return
    for source in sources:
        rel = source.type_file.relative_to(engine.settings.project_root).as_posix()
        print(f"{source.name}\t{rel}")


def main(argv: Optional[List[str]] = None) -> int:
    """Run sdkmodels from the command line.

    Returns:
        Process exit code: 0 on success, 1 on a fatal error.
    """
    args = parse_arguments(argv)
    logger = setup_logger("sdkmodels", verbose=args.verbose)

    # .env may carry the project root, so look for it in the cwd first.
    load_env_file(Path.cwd())
    project_root = resolve_project_root(args.project_root)

    if not project_root.is_dir():
        print(f"Error: Invalid directory '{project_root}'")
        return 1

    load_env_file(project_root)
    config = load_or_create_config(project_root, logger=logger)

    try:
        settings = ExtractionSettings.from_arguments(args, config, project_root)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    engine = ExtractionEngine(config, settings)

    if args.list_providers:
        list_providers(engine)
        return 0

    try:
        engine.run()
    except RegistryCollisionError as e:
        logger.error(f"{e}. Re-run with --allow-collisions to continue anyway.")
        return 1
    except OSError:
        return 1

    if args.tree and engine.registry is not None:
        for line in format_registry_tree(engine.registry):
            print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
