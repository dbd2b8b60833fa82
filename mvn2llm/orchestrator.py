"""Pipeline orchestration for extract/scan flows."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .archive import extract_units, iter_units
from .config import Mvn2LlmConfig
from .extract import scan_text
from .logging import get_logger
from .maven import MavenClient, MavenCoordinate, ProxyConfig
from .models import DocRecord
from .stores import ArchiveCache


@dataclass
class ExtractionResult:
    """Records produced by one pipeline run."""

    records: List[DocRecord]
    source: str
    units: int


class Orchestrator:
    """Coordinates coordinate resolution, download, caching and extraction."""

    def __init__(
        self,
        config: Mvn2LlmConfig | None = None,
        *,
        client: MavenClient | None = None,
        cache: ArchiveCache | None = None,
    ) -> None:
        self.config = config or Mvn2LlmConfig()
        self.logger = get_logger("orchestrator")
        self.client = client or MavenClient(
            self.config.repository,
            proxy=ProxyConfig.resolve(self.config.proxy.http, self.config.proxy.https),
            timeout=self.config.timeout,
        )
        self._cache = cache

    @property
    def cache(self) -> Optional[ArchiveCache]:
        if self._cache is None and self.config.cache.enabled:
            self._cache = ArchiveCache(self.config.cache.dir)
        return self._cache

    def run_extract(self, coordinate: str | MavenCoordinate) -> ExtractionResult:
        """Fetch the sources jar for `coordinate` and extract its doc records."""
        if isinstance(coordinate, str):
            coordinate = MavenCoordinate.parse(coordinate)
        self.logger.debug("Parsed coordinate: %s", coordinate)

        relative_path = self.client.artifact_path(coordinate)
        url = self.client.url_for(relative_path)

        cache = self.cache
        if cache is None:
            return self._extract_uncached(url)

        cached = cache.get(url)
        if cached is not None:
            self.logger.info("Using cached source JAR %s", cached)
            return self._extract_from(cached, source=url)

        self.logger.info("Downloading source JAR from %s", url)
        data = self.client.fetch_bytes(url)
        path = cache.store(url, relative_path, data)
        cache.persist()
        self.logger.debug("Cached %d bytes at %s", len(data), path)
        return self._extract_from(path, source=url)

    def run_scan(self, path: str | Path) -> ExtractionResult:
        """Extract doc records from a local archive, directory or source file."""
        target = Path(path).expanduser().resolve()
        self.logger.info("Scanning %s", target)
        return self._extract_from(target, source=str(target))

    def scan_source(self, origin: str, text: str) -> List[DocRecord]:
        return scan_text(origin, text)

    def _extract_uncached(self, url: str) -> ExtractionResult:
        self.logger.info("Downloading source JAR from %s", url)
        data = self.client.fetch_bytes(url)
        with tempfile.NamedTemporaryFile(prefix="maven-source", suffix=".jar", delete=False) as handle:
            handle.write(data)
            temp_path = Path(handle.name)
        self.logger.debug("Created temporary file: %s", temp_path)
        try:
            return self._extract_from(temp_path, source=url)
        finally:
            temp_path.unlink(missing_ok=True)
            self.logger.debug("Cleaned up temporary files")

    def _extract_from(self, path: Path, *, source: str) -> ExtractionResult:
        units = list(iter_units(path))
        self.logger.debug("Found %d Java source units in %s", len(units), path)
        records = extract_units(units, workers=self.config.workers)
        self.logger.info("Extracted %d documented declarations from %d files", len(records), len(units))
        return ExtractionResult(records=records, source=source, units=len(units))


__all__ = ["ExtractionResult", "Orchestrator"]
