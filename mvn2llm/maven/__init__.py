"""Maven repository collaborators: coordinates, metadata, proxies and downloads."""

from .client import DEFAULT_REPOSITORY, ArtifactNotFoundError, DownloadError, MavenClient
from .coordinates import CoordinateError, MavenCoordinate
from .metadata import MetadataError, parse_snapshot_version
from .proxy import ProxyConfig

__all__ = [
    "ArtifactNotFoundError",
    "CoordinateError",
    "DEFAULT_REPOSITORY",
    "DownloadError",
    "MavenClient",
    "MavenCoordinate",
    "MetadataError",
    "ProxyConfig",
    "parse_snapshot_version",
]
