"""Extraction of zipped game archives."""

from __future__ import annotations

import os
import shutil
import zipfile
from pathlib import Path

_READ_CHUNK = 8192


class ArchiveError(Exception):
    """Raised when a game archive cannot be read or extracted."""


def _target(root: str, name: str) -> str:
    target = os.path.realpath(os.path.join(root, name))
    if target != root and not target.startswith(root + os.sep):
        raise ArchiveError(f"entry {name!r} lies outside the extraction directory")
    return target


def unzip(path: str | Path, extraction_directory: str | Path) -> None:
    """Extract every entry of the zip archive ``path`` into ``extraction_directory``.

    Entries ending in ``/`` become directories. Files are written into
    directories that already exist; an entry whose directory is missing
    raises ArchiveError, as do unreadable or missing archives.
    """
    os.makedirs(extraction_directory, exist_ok=True)
    try:
        archive = zipfile.ZipFile(path)
    except FileNotFoundError:
        raise ArchiveError(f"{path}: not found") from None
    except (zipfile.BadZipFile, OSError) as exc:
        raise ArchiveError("could not read file global info") from exc

    root = os.path.realpath(extraction_directory)
    with archive:
        for info in archive.infolist():
            target = _target(root, info.filename)
            if info.filename.endswith("/"):
                os.makedirs(target, exist_ok=True)
                continue
            try:
                out = open(target, "wb")
            except OSError as exc:
                raise ArchiveError("could not open destination file") from exc
            try:
                with out, archive.open(info) as src:
                    shutil.copyfileobj(src, out, _READ_CHUNK)
            except (zipfile.BadZipFile, OSError) as exc:
                raise ArchiveError(f"error reading {info.filename}") from exc