"""Source unit discovery for archives, directories and single files."""

from __future__ import annotations

import os
import zipfile
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Iterator, List

from .extract import scan_lines, split_lines
from .logging import get_logger
from .models import DocRecord, SourceUnit

JAVA_SUFFIX = ".java"

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".idea",
    "node_modules",
    "target",
    "build",
}

logger = get_logger("archive")


class ArchiveError(RuntimeError):
    """Raised when a path cannot be walked for Java sources."""


def origin_for(entry_name: str) -> str:
    """Turn `com/example/Foo.java` into `com.example.Foo`."""
    name = entry_name.replace("\\", "/").lstrip("/")
    if name.endswith(JAVA_SUFFIX):
        name = name[: -len(JAVA_SUFFIX)]
    return name.replace("/", ".")


def _decode_lines(name: str, data: bytes) -> tuple[str, ...]:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        logger.warning("Failed to process file %s: %s", name, exc)
        return ()
    return tuple(split_lines(text))


def iter_archive_units(path: Path) -> Iterator[SourceUnit]:
    """Yield one unit per `.java` entry of a JAR/ZIP, in entry order."""
    logger.debug("Processing archive %s", path)
    try:
        archive = zipfile.ZipFile(path)
    except (OSError, zipfile.BadZipFile) as exc:
        raise ArchiveError(f"Cannot open archive {path}: {exc}") from exc
    with archive:
        for info in archive.infolist():
            if info.is_dir() or not info.filename.endswith(JAVA_SUFFIX):
                continue
            logger.debug("Processing Java file: %s", info.filename)
            try:
                data = archive.read(info)
            except (OSError, zipfile.BadZipFile, RuntimeError) as exc:
                logger.warning("Failed to process file %s: %s", info.filename, exc)
                data = b""
            yield SourceUnit(origin=origin_for(info.filename), lines=_decode_lines(info.filename, data))


def iter_directory_units(root: Path) -> Iterator[SourceUnit]:
    """Yield one unit per `.java` file below `root`, sorted by relative path."""
    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in _EXCLUDED_DIRS)
        for filename in filenames:
            if filename.endswith(JAVA_SUFFIX):
                found.append(Path(dirpath) / filename)

    for path in sorted(found, key=lambda item: item.relative_to(root).as_posix()):
        rel_path = path.relative_to(root).as_posix()
        yield _file_unit(path, rel_path)


def _file_unit(path: Path, name: str) -> SourceUnit:
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.warning("Failed to process file %s: %s", name, exc)
        data = b""
    return SourceUnit(origin=origin_for(name), lines=_decode_lines(name, data))


def iter_units(path: Path) -> Iterator[SourceUnit]:
    """Dispatch on the kind of path: archive, directory or single source file."""
    path = path.expanduser()
    if not path.exists():
        raise ArchiveError(f"Path not found: {path}")
    if path.is_dir():
        return iter_directory_units(path)
    if path.suffix == JAVA_SUFFIX:
        return iter([_file_unit(path, path.name)])
    if zipfile.is_zipfile(path):
        return iter_archive_units(path)
    raise ArchiveError(f"Not a JAR/ZIP archive, directory or .java file: {path}")


def _scan_unit(unit: SourceUnit) -> List[DocRecord]:
    return scan_lines(unit.origin, unit.lines)


def extract_units(units: Iterable[SourceUnit], *, workers: int = 1) -> List[DocRecord]:
    """Scan each unit independently and return records in unit order."""
    records: List[DocRecord] = []
    if workers <= 1:
        for unit in units:
            records.extend(_scan_unit(unit))
        return records

    with ThreadPoolExecutor(max_workers=workers) as executor:
        for unit_records in executor.map(_scan_unit, units):
            records.extend(unit_records)
    return records


def extract_path(path: Path, *, workers: int = 1) -> List[DocRecord]:
    return extract_units(iter_units(path), workers=workers)


__all__ = [
    "ArchiveError",
    "extract_path",
    "extract_units",
    "iter_archive_units",
    "iter_directory_units",
    "iter_units",
    "origin_for",
]
