"""Creating zip archives from files and extracting them safely."""

from __future__ import annotations

import os
import shutil
import time
import zipfile
from collections.abc import Iterable

_MIN_DATE_TIME = (1980, 1, 1, 0, 0, 0)


def create(filename: str | os.PathLike[str], files: Iterable[str]) -> None:
    """Write a new zip archive ``filename`` holding each path in ``files``.

    Each entry is stored under the path exactly as given and compressed with deflate.
    """
    with zipfile.ZipFile(filename, "w") as archive:
        for path in files:
            add_file_to_zip(archive, path)


def add_file_to_zip(archive: zipfile.ZipFile, filename: str) -> None:
    """Add the file ``filename`` to an open archive under that same name."""
    with open(filename, "rb") as source:
        stat = os.fstat(source.fileno())
        date_time = max(tuple(time.localtime(stat.st_mtime)[:6]), _MIN_DATE_TIME)
        info = zipfile.ZipInfo(filename, date_time=date_time)
        info.compress_type = zipfile.ZIP_DEFLATED
        info.external_attr = (stat.st_mode & 0xFFFF) << 16
        info.file_size = stat.st_size
        with archive.open(info, "w") as target:
            shutil.copyfileobj(source, target)


def _entry_mode(info: zipfile.ZipInfo) -> int:
    mode = (info.external_attr >> 16) & 0o777
    return mode or 0o666


def unzip(src: str | os.PathLike[str], dest: str) -> list[str]:
    """Extract every entry of ``src`` below ``dest`` and return the written paths.

    An entry whose path would land outside ``dest`` raises ValueError.
    """
    root = os.path.normpath(dest) + os.sep
    filenames: list[str] = []
    with zipfile.ZipFile(src) as archive:
        for info in archive.infolist():
            target = os.path.normpath(dest + os.sep + info.filename)
            if not target.startswith(root):
                raise ValueError(f"{target}: illegal file path")
            filenames.append(target)

            if info.is_dir():
                os.makedirs(target, exist_ok=True)
                continue

            os.makedirs(os.path.dirname(target), exist_ok=True)
            fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _entry_mode(info))
            with os.fdopen(fd, "wb") as out, archive.open(info) as entry:
                shutil.copyfileobj(entry, out)
    return filenames