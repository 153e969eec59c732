"""Extraction settings and discovery of provider declaration files."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import pathspec

from .config import ConfigError
from .constants import (
    ENV_OUTPUT_FILE,
    NODE_MODULES_DIR,
    OFFICIAL_TYPE_FILE,
    OUTPUT_FORMATS,
)
from .processors import is_declaration_file


@dataclass
class ExtractionSettings:
    """Container for extraction run parameters.

    Attributes:
        project_root: Directory holding the ``node_modules`` tree to scan.
        output_file: Path where the generated registry will be written.
        output_format: ``"typescript"`` or ``"json"``.
        on_collision: ``"error"`` or ``"warn"`` for cross-provider type name collisions.
        dry_run: Whether to skip writing the output file.
        verbose: Whether to show detailed processing logs.
    """
    project_root: Path
    output_file: Path
    output_format: str = "typescript"
    on_collision: str = "error"
    dry_run: bool = False
    verbose: bool = False

    @classmethod
    def from_arguments(cls, args: Any, config: Dict[str, Any], project_root: Path) -> "ExtractionSettings":
        """Factory to create settings from CLI args and config.

        CLI flags win over environment variables, which win over the config file.

        Args:
            args: Parsed CLI arguments from argparse.
            config: Loaded configuration dictionary.
            project_root: Resolved project directory.

        Returns:
            ExtractionSettings instance with all parameters resolved.

        Raises:
            ConfigError: If the resolved output format is unknown.
        """
        output = args.output_file or os.environ.get(ENV_OUTPUT_FILE) or config["output_file"]
        output_file = Path(output)
        if not output_file.is_absolute():
            output_file = project_root / output_file

        output_format = args.format or config.get("output_format", "typescript")
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(f"Unknown output format: {output_format}")

        on_collision = "warn" if args.allow_collisions else config.get("on_collision", "error")

        return cls(
            project_root=project_root,
            output_file=output_file,
            output_format=output_format,
            on_collision=on_collision,
            dry_run=args.dry_run,
            verbose=args.verbose,
        )


@dataclass(frozen=True)
class ProviderSource:
    """A provider package and the declaration file its models are read from."""
    name: str
    type_file: Path


class DiscoverySession:
    """Locate provider declaration files inside a ``node_modules`` tree.

    Official providers are every package under a configured scope that ships
    ``dist/index.d.ts``; community providers come from a fixed list and may keep
    their declarations in any of the configured candidate locations.
    """

    def __init__(self, project_root: Path, config: Dict[str, Any]) -> None:
        """Initialize the session with discovery settings.

        Args:
            project_root: Directory containing ``node_modules``.
            config: Loaded configuration dictionary.
        """
        self.project_root = project_root
        self.node_modules = project_root / NODE_MODULES_DIR
        self.official_scopes: List[str] = list(config.get("official_scopes", []))
        self.community_providers: List[str] = list(config.get("community_providers", []))
        self.type_file_candidates: List[str] = list(config.get("type_file_candidates", []))
        self.matcher = self._create_matcher(config.get("ignore_providers", []))

        self.sources: List[ProviderSource] = []
        self.skipped: List[Dict[str, str]] = []

    @staticmethod
    def _create_matcher(patterns: List[str]) -> Optional[pathspec.PathSpec]:
        if not patterns:
            return None
        return pathspec.GitIgnoreSpec.from_lines(patterns)

    def log_skip(self, provider: str, reason: str) -> None:
        """Record a provider that was left out of discovery."""
        self.skipped.append({"provider": provider, "reason": reason})

    def is_ignored(self, provider: str) -> bool:
        """Check a provider id against the ``ignore_providers`` patterns."""
        if self.matcher is None:
            return False
        return self.matcher.match_file(provider)

    def find_type_file(self, package_dir: Path) -> Optional[Path]:
        """Return the first existing candidate declaration file of a package."""
        for candidate in self.type_file_candidates:
            type_file = package_dir / candidate
            if is_declaration_file(type_file):
                return type_file
        return None

    def discover(self) -> List[ProviderSource]:
        """Scan for official providers, then community providers.

        Returns:
            Provider sources in discovery order.
        """
        self.sources = []
        self.skipped = []

        if not self.node_modules.is_dir():
            self.log_skip(NODE_MODULES_DIR, f"No {NODE_MODULES_DIR} directory in {self.project_root}")
            return []

        self._discover_official()
        self._discover_community()
        return list(self.sources)

    def _add(self, name: str, type_file: Path) -> None:
        if self.is_ignored(name):
            self.log_skip(name, "Ignored by configuration")
            return
        if any(source.name == name for source in self.sources):
            return
        self.sources.append(ProviderSource(name=name, type_file=type_file))

    def _discover_official(self) -> None:
        for scope in self.official_scopes:
            scope_dir = self.node_modules / scope
            try:
                with os.scandir(scope_dir) as it:
                    entries = sorted(it, key=lambda e: e.name)
            except (FileNotFoundError, NotADirectoryError):
                continue
            except PermissionError:
                self.log_skip(scope, "[Permission Denied]")
                continue
            except OSError as e:
                self.log_skip(scope, str(e))
                continue

            for entry in entries:
                type_file = Path(entry.path) / OFFICIAL_TYPE_FILE
                try:
                    if not entry.is_dir():
                        continue
                    found = is_declaration_file(type_file)
                except OSError as e:
                    self.log_skip(entry.name, str(e))
                    continue
                if found:
                    self._add(entry.name, type_file)
                else:
                    self.log_skip(entry.name, f"No {OFFICIAL_TYPE_FILE}")

    def _discover_community(self) -> None:
        for provider in self.community_providers:
            package_dir = self.node_modules / provider
            try:
                if not package_dir.is_dir():
                    continue
                type_file = self.find_type_file(package_dir)
            except OSError as e:
                self.log_skip(provider, str(e))
                continue
            if type_file is None:
                self.log_skip(provider, "No type definition file found")
                continue
            self._add(provider, type_file)
