"""Packing files and directories into gzip-compressed tar archives."""

from __future__ import annotations

import io
import os
import stat
import tarfile
from collections.abc import Iterator

StrPath = str | os.PathLike


def is_dir(path: StrPath) -> bool:
    """Return whether ``path`` is a directory; raise ``OSError`` if it cannot be read."""
    return stat.S_ISDIR(os.stat(path).st_mode)


def _walk(path: str) -> Iterator[tuple[str, os.stat_result]]:
    """Yield ``path`` and everything below it in lexical order, without following links."""
    info = os.lstat(path)
    yield path, info
    if stat.S_ISDIR(info.st_mode):
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, name))


def _tar_info(archive: tarfile.TarFile, path: str, name: str, info: os.stat_result) -> tarfile.TarInfo:
    if stat.S_ISDIR(info.st_mode):
        entry = tarfile.TarInfo(name)
        entry.type = tarfile.DIRTYPE
    elif stat.S_ISREG(info.st_mode):
        entry = tarfile.TarInfo(name)
        entry.size = info.st_size
    else:
        entry = archive.gettarinfo(path, arcname=name)
        if entry is None:
            raise OSError(f"unsupported file type: {path}")
        return entry
    entry.mtime = int(info.st_mtime)
    entry.uid = getattr(info, "st_uid", 0)
    entry.gid = getattr(info, "st_gid", 0)
    return entry


def tar_dir(src: StrPath, file_mode: int) -> bytes:
    """Archive the directory ``src`` as tar + gzip, keeping paths relative to its parent.

    Symbolic links are skipped and every entry gets ``file_mode``.
    """
    src = os.path.abspath(src)
    print(f">> creating TAR file from directory: {src}")

    base_dir = os.path.basename(src)
    index = src.rfind(base_dir)

    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for path, info in _walk(src):
            if stat.S_ISLNK(info.st_mode):
                print(f">> skipping symlink: {path}")
                continue

            name = path[index:].replace(os.sep, "/")
            entry = _tar_info(archive, path, name, info)
            entry.mode = file_mode

            if entry.isreg():
                with open(path, "rb") as data:
                    archive.addfile(entry, data)
            else:
                archive.addfile(entry)
    return buffer.getvalue()


def tar_file(file_content: bytes, base_path: StrPath, file_mode: int) -> bytes:
    """Archive ``file_content`` as a single entry named after the base name of ``base_path``."""
    entry = tarfile.TarInfo(os.path.basename(os.fspath(base_path)))
    entry.mode = file_mode
    entry.size = len(file_content)

    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        archive.addfile(entry, io.BytesIO(file_content))
    return buffer.getvalue()