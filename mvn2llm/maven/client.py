"""Download client for Maven repository artifacts."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol
from urllib.error import HTTPError, URLError
from urllib.request import ProxyHandler, Request, build_opener

from ..logging import get_logger
from .coordinates import MavenCoordinate
from .metadata import MetadataError, parse_snapshot_version
from .proxy import ProxyConfig

DEFAULT_REPOSITORY = "https://repo1.maven.org/maven2"
DEFAULT_TIMEOUT = 60.0
USER_AGENT = "mvn2llm/0.1"


class DownloadError(RuntimeError):
    """Raised when an artifact cannot be fetched from the repository."""


class ArtifactNotFoundError(DownloadError):
    """Raised when the repository answers 404 for an artifact."""


class _Opener(Protocol):
    def open(self, request: Request, timeout: float = ...):  # pragma: no cover - protocol
        ...


class MavenClient:
    """Resolves coordinates to URLs and fetches artifacts over HTTP(S)."""

    def __init__(
        self,
        repository: str = DEFAULT_REPOSITORY,
        *,
        proxy: ProxyConfig | None = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        opener: _Opener | None = None,
    ) -> None:
        self.repository = repository.rstrip("/")
        self.proxy = proxy or ProxyConfig()
        self.timeout = timeout or DEFAULT_TIMEOUT
        self.logger = get_logger("maven.client")
        if opener is not None:
            self._opener = opener
        else:
            # An explicit mapping keeps urllib from reading proxies from the
            # environment a second time; ProxyConfig already did that.
            self._opener = build_opener(ProxyHandler(self.proxy.handler_mapping()))
        if self.proxy.enabled:
            self.logger.debug("Using proxies %s", self.proxy.handler_mapping())

    def url_for(self, relative_path: str) -> str:
        return f"{self.repository}/{relative_path.lstrip('/')}"

    def resolve_version(self, coordinate: MavenCoordinate) -> str:
        """Return the concrete file version, consulting metadata for SNAPSHOTs."""
        if not coordinate.is_snapshot:
            return coordinate.version
        metadata_url = self.url_for(coordinate.metadata_path())
        self.logger.debug("Resolving snapshot version from %s", metadata_url)
        try:
            xml = self.fetch_bytes(metadata_url).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MetadataError(f"Snapshot metadata at {metadata_url} is not UTF-8") from exc
        resolved = parse_snapshot_version(xml, coordinate.version)
        self.logger.debug("Resolved %s to %s", coordinate, resolved)
        return resolved

    def artifact_path(self, coordinate: MavenCoordinate) -> str:
        return coordinate.artifact_path(self.resolve_version(coordinate))

    def artifact_url(self, coordinate: MavenCoordinate) -> str:
        return self.url_for(self.artifact_path(coordinate))

    def fetch_bytes(self, url: str) -> bytes:
        request = Request(url, headers={"User-Agent": USER_AGENT}, method="GET")
        try:
            with self._opener.open(request, timeout=self.timeout) as response:
                return response.read()
        except HTTPError as exc:
            if exc.code == 404:
                raise ArtifactNotFoundError(
                    f"Could not resolve Maven coordinates. URL not found: {url}"
                ) from exc
            raise DownloadError(
                f"Failed to download {url}. Status code: {exc.code}"
            ) from exc
        except URLError as exc:
            raise DownloadError(f"Failed to download {url}: {exc.reason}") from exc
        except OSError as exc:
            raise DownloadError(f"Failed to download {url}: {exc}") from exc

    def download(self, coordinate: MavenCoordinate, destination: Path) -> Path:
        """Write the sources jar for `coordinate` to `destination`."""
        url = self.artifact_url(coordinate)
        self.logger.info("Downloading source JAR from %s", url)
        data = self.fetch_bytes(url)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(data)
        self.logger.debug("Wrote %d bytes to %s", len(data), destination)
        return destination


__all__ = [
    "ArtifactNotFoundError",
    "DEFAULT_REPOSITORY",
    "DownloadError",
    "MavenClient",
]
