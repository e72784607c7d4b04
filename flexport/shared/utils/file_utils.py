# flexport/shared/utils/file_utils.py

"""Filesystem helpers for export files"""

# Standard library imports
from errno import EACCES
from errno import ENOENT
from errno import ENOTDIR
from logging import getLogger
from os import W_OK
from os import X_OK
from os import access
from os import chmod
from os import fsync
from os import replace
from os import strerror
from pathlib import Path
from shutil import copyfileobj
from tempfile import NamedTemporaryFile

logger = getLogger(__name__)

# Permissions of written export files (temporary files start out as 0600)
EXPORT_FILE_MODE = 0o644


def ensure_writable_directory(target_directory: str | Path) -> Path:
    """Check that exports can be written into a directory

    Args:
        target_directory: Directory that should receive export files

    Returns:
        The directory as a Path

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
        PermissionError: If the directory is not writable
    """
    directory = Path(target_directory)
    if not directory.exists():
        raise FileNotFoundError(ENOENT, strerror(ENOENT), str(directory))
    if not directory.is_dir():
        raise NotADirectoryError(ENOTDIR, strerror(ENOTDIR), str(directory))
    if not access(directory, W_OK | X_OK):
        raise PermissionError(EACCES, strerror(EACCES), str(directory))
    return directory


def write_atomic(path: Path, content: str, encoding: str = "utf-8", append: bool = False) -> None:
    """Write a file so that readers never see partial content

    The content goes to a temporary file in the target directory which then
    replaces the target. On failure the temporary file is removed and an
    existing target is left unchanged.

    Args:
        path: Target file
        content: Text to write
        encoding: Text encoding of the file
        append: Keep the existing content of the target and add to it
    """
    temp_file = NamedTemporaryFile(
        mode="w",
        encoding=encoding,
        newline="",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    )
    temp_path = Path(temp_file.name)
    try:
        with temp_file:
            if append and path.exists():
                with open(path, "r", encoding=encoding, newline="") as existing:
                    copyfileobj(existing, temp_file)
            temp_file.write(content)
            temp_file.flush()
            fsync(temp_file.fileno())
        chmod(temp_path, EXPORT_FILE_MODE)
        replace(temp_path, path)
    except BaseException:
        logger.debug(f"Removing temporary file {temp_path} after failed write to {path}")
        temp_path.unlink(missing_ok=True)
        raise
