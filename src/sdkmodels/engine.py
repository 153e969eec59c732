"""ExtractionEngine - Core orchestration engine for sdkmodels."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .constants import DEFAULT_EXCLUDED_ALIASES
from .core import DiscoverySession, ExtractionSettings, ProviderSource
from .extractor import extract_model_types
from .models import ModelTypeRecord
from .processors import read_declaration
from .registry import Registry, build_registry, dedupe_records
from .utils import setup_logger
from .writer import RegistryWriter


@dataclass
class ExtractionSummary:
    """Counts reported at the end of an extraction run."""
    providers_found: int
    providers_processed: int
    type_count: int
    model_count: int
    output_file: Optional[Path] = None
    skipped: List[Dict[str, str]] = field(default_factory=list)


def extract_provider_records(
    sources: Iterable[ProviderSource],
    excluded_aliases: Iterable[str] = DEFAULT_EXCLUDED_ALIASES,
    logger: Optional[logging.Logger] = None,
    skipped: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, List[ModelTypeRecord]]:
    """Read and extract every provider independently.

    A provider whose file cannot be read, or whose extraction fails, is logged
    and left out; the others are still processed.

    Args:
        sources: Discovered provider sources, in discovery order.
        excluded_aliases: Alias names that are never recorded.
        logger: Optional logger instance.
        skipped: Optional list collecting ``{provider, reason}`` for each skip.

    Returns:
        Mapping of provider id to its extracted records, for providers with records.
    """
    logger = logger or logging.getLogger(__name__)
    excluded = tuple(excluded_aliases)
    provider_records: Dict[str, List[ModelTypeRecord]] = {}

    for source in sources:
        logger.debug(f"Processing {source.name} ({source.type_file})")
        content, error_msg = read_declaration(source.type_file)
        if error_msg:
            logger.warning(f"⚠️  Skipping {source.name}: {error_msg}")
            if skipped is not None:
                skipped.append({"provider": source.name, "reason": error_msg})
            continue

        try:
            records = extract_model_types(content, excluded)
        except Exception as e:
            logger.error(f"Error processing {source.name}: {e}")
            if skipped is not None:
                skipped.append({"provider": source.name, "reason": str(e)})
            continue

        if records:
            provider_records[source.name] = records
            logger.info(f"{source.name}: found {len(dedupe_records(records))} model types")
        else:
            logger.info(f"{source.name}: no model types found")

    return provider_records


class ExtractionEngine:
    """Orchestrate discovery, extraction, registry building and output writing."""

    def __init__(
        self,
        config: Dict[str, Any],
        settings: ExtractionSettings,
        session_cls: type = DiscoverySession,
        writer_cls: type = RegistryWriter,
    ):
        """Initialize the engine with configuration and run settings.

        Args:
            config: Configuration dictionary
            settings: Extraction settings
            session_cls: DiscoverySession class to use (dependency injection point)
            writer_cls: RegistryWriter class to use (dependency injection point)
        """
        self.config = config
        self.settings = settings
        self.session_cls = session_cls
        self.writer_cls = writer_cls
        self.logger = setup_logger("sdkmodels", verbose=settings.verbose)
        self.registry: Optional[Registry] = None
        self.sources: List[ProviderSource] = []
        self.skipped: List[Dict[str, str]] = []

    def discover(self) -> List[ProviderSource]:
        """Run provider discovery only, logging what was left out."""
        session = self.session_cls(self.settings.project_root, self.config)
        sources = session.discover()
        self.skipped = list(session.skipped)
        for skip in session.skipped:
            self.logger.debug(f"Skipped {skip['provider']}: {skip['reason']}")
        return sources

    def build(self) -> Registry:
        """Discover providers, extract their records and build the registry."""
        self.sources = self.discover()
        names = ", ".join(source.name for source in self.sources)
        self.logger.info(f"Found {len(self.sources)} providers: {names}")

        provider_records = extract_provider_records(
            self.sources,
            self.config.get("excluded_aliases", DEFAULT_EXCLUDED_ALIASES),
            logger=self.logger,
            skipped=self.skipped,
        )
        self.registry = build_registry(
            provider_records,
            on_collision=self.settings.on_collision,
            logger=self.logger,
        )
        return self.registry

    def run(self) -> ExtractionSummary:
        """Execute the complete extraction and write the generated file.

        Raises:
            RegistryCollisionError: If providers collide and collisions are not allowed.
            OSError: If the output file cannot be written.
        """
        registry = self.build()
        output_file: Optional[Path] = None

        if not self.settings.dry_run:
            output_file = self.settings.output_file.resolve()
            self._write(registry, output_file)

        summary = ExtractionSummary(
            providers_found=len(self.sources),
            providers_processed=len(registry.providers),
            type_count=registry.type_count,
            model_count=registry.model_count,
            output_file=output_file,
            skipped=list(self.skipped),
        )
        self._finalize(summary)
        return summary

    def _write(self, registry: Registry, output_file: Path) -> None:
        try:
            out_dir = output_file.parent
            if not out_dir.exists():
                out_dir.mkdir(parents=True)

            with open(output_file, "w", encoding="utf-8") as f:
                writer = self.writer_cls(f, output_format=self.settings.output_format)
                writer.write_registry(registry)
        except OSError as e:
            self.logger.error(f"Error writing {output_file}: {e}")
            raise

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Wrote {writer.total_chars:,} characters")

    def _finalize(self, summary: ExtractionSummary) -> None:
        """Log the run summary."""
        if summary.output_file is not None:
            self.logger.info(f"Generated model types file: {summary.output_file}")
        else:
            self.logger.info("Dry run: no output written")
        self.logger.info(f"Providers processed: {summary.providers_processed}")
        self.logger.info(f"Total model types: {summary.type_count}")
        self.logger.info(f"Total models: {summary.model_count}")
