"""Maven coordinate parsing and repository path layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

SNAPSHOT_SUFFIX = "-SNAPSHOT"


class CoordinateError(ValueError):
    """Raised when a coordinate is not of the form groupId:artifactId:version."""


@dataclass(frozen=True)
class MavenCoordinate:
    """A groupId:artifactId:version triple pointing at a sources jar."""

    group_id: str
    artifact_id: str
    version: str
    classifier: str = "sources"

    @classmethod
    def parse(cls, value: str) -> "MavenCoordinate":
        parts = [part.strip() for part in value.strip().split(":")]
        if len(parts) != 3 or not all(parts):
            raise CoordinateError(
                f"Invalid coordinate '{value}'. Expected: groupId:artifactId:version"
            )
        return cls(group_id=parts[0], artifact_id=parts[1], version=parts[2])

    @property
    def is_snapshot(self) -> bool:
        return self.version.endswith(SNAPSHOT_SUFFIX)

    @property
    def base_version(self) -> str:
        if self.is_snapshot:
            return self.version[: -len(SNAPSHOT_SUFFIX)]
        return self.version

    def directory_path(self) -> str:
        group_path = self.group_id.replace(".", "/")
        return f"{group_path}/{self.artifact_id}/{self.version}"

    def artifact_path(self, resolved_version: Optional[str] = None) -> str:
        version = resolved_version or self.version
        filename = f"{self.artifact_id}-{version}-{self.classifier}.jar"
        return f"{self.directory_path()}/{filename}"

    def metadata_path(self) -> str:
        return f"{self.directory_path()}/maven-metadata.xml"

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


__all__ = ["CoordinateError", "MavenCoordinate", "SNAPSHOT_SUFFIX"]
