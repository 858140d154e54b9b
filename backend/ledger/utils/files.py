# backend/ledger/utils/files.py
import mimetypes
import re
import shutil
from pathlib import Path
from uuid import uuid4
from fastapi import UploadFile

from ..exceptions import StorageIOError

_SAFE_SUFFIX = re.compile(r"^\.[A-Za-z0-9]{1,16}$")

DEFAULT_MIME_TYPE = "application/octet-stream"


def generate_storage_name(original_name: str | None) -> str:
    """Random storage name that keeps a sane extension of the client filename"""
    suffix = Path(original_name or "").suffix.lower()
    if not _SAFE_SUFFIX.match(suffix):
        suffix = ""
    return f"{uuid4().hex}{suffix}"


def detect_mime_type(upload_file: UploadFile) -> str:
    """Declared content type, else a guess from the filename"""
    declared = (upload_file.content_type or "").strip()
    if declared and declared != DEFAULT_MIME_TYPE:
        return declared
    guessed, _ = mimetypes.guess_type(upload_file.filename or "")
    return guessed or declared or DEFAULT_MIME_TYPE


async def save_upload_file(upload_file: UploadFile, directory: Path) -> Path:
    """Save an uploaded file under a unique name and return the path"""
    directory.mkdir(parents=True, exist_ok=True)
    file_path = directory / generate_storage_name(upload_file.filename)

    with file_path.open("wb") as buffer:
        shutil.copyfileobj(upload_file.file, buffer)

    return file_path


def delete_file(file_path: Path) -> bool:
    """Delete a file if it exists.

    Returns False when there was nothing to delete. Raises StorageIOError
    when the file exists but cannot be removed.
    """
    try:
        file_path.unlink()
        return True
    except FileNotFoundError:
        return False
    except OSError as e:
        raise StorageIOError(file_path.name, e) from e
