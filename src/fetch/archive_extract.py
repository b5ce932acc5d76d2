"""Release archive unpacking helpers.

Upstream archives carry ``bin/protoc[.exe]`` and an ``include/`` tree.
Only those two pieces are ever taken out of an archive.
"""

from __future__ import annotations

import io
from pathlib import Path, PurePosixPath
import shutil
import zipfile
import zlib

from core.constants import INCLUDE_DIR_NAME
from core.errors import ProtocArchiveError


def read_archive_member(archive_bytes: bytes, member: str) -> bytes:
    """Read a single file from a zip archive held in memory.

    Args:
        archive_bytes: Raw zip payload.
        member: Member path inside the archive.

    Returns:
        Member file contents.

    Raises:
        ProtocArchiveError: If the payload is not a zip, lacks the member,
            or the member is corrupt.
    """
    with _open_archive(archive_bytes) as archive:
        try:
            info = archive.getinfo(member)
        except KeyError as error:
            raise ProtocArchiveError(f"Release archive has no member {member}.") from error
        return _read_member(archive, info)


def replace_include_tree(archive_bytes: bytes, include_dir: Path) -> Path:
    """Replace ``include_dir`` with the archive's ``include/`` tree.

    Every member is read before the existing directory is removed, so a
    corrupt archive leaves the current bundle in place.

    Args:
        archive_bytes: Raw zip payload.
        include_dir: Destination include directory, removed first if present.

    Returns:
        The populated include directory.

    Raises:
        ProtocArchiveError: If the archive has no include files, unsafe paths,
            or corrupt members.
    """
    with _open_archive(archive_bytes) as archive:
        members = _include_members(archive)
        if not members:
            raise ProtocArchiveError("Release archive has no include/ files.")
        contents = [(relative_path, _read_member(archive, info)) for info, relative_path in members]
    if include_dir.exists():
        shutil.rmtree(include_dir)
    for relative_path, payload in contents:
        destination = include_dir.joinpath(*relative_path.parts)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(payload)
    return include_dir


def _include_members(
    archive: zipfile.ZipFile,
) -> list[tuple[zipfile.ZipInfo, PurePosixPath]]:
    members: list[tuple[zipfile.ZipInfo, PurePosixPath]] = []
    for info in archive.infolist():
        if info.is_dir():
            continue
        member_path = PurePosixPath(info.filename)
        if member_path.is_absolute():
            raise ProtocArchiveError(f"Release archive member has absolute path {info.filename}.")
        if not member_path.parts or member_path.parts[0] != INCLUDE_DIR_NAME:
            continue
        if ".." in member_path.parts:
            raise ProtocArchiveError(f"Release archive member has unsafe path {info.filename}.")
        relative_path = member_path.relative_to(INCLUDE_DIR_NAME)
        if not relative_path.parts:
            continue
        members.append((info, relative_path))
    return members


def _read_member(archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> bytes:
    try:
        return archive.read(info)
    except (zipfile.BadZipFile, zlib.error, EOFError) as error:
        raise ProtocArchiveError(
            f"Release archive member {info.filename} is corrupt: {error}. "
            "Re-run the update to download the archive again."
        ) from error


def _open_archive(archive_bytes: bytes) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(io.BytesIO(archive_bytes))
    except zipfile.BadZipFile as error:
        raise ProtocArchiveError(f"Release archive is not a valid zip file: {error}") from error
