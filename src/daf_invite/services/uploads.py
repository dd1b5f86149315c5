"""Image upload reading for invitation designs."""

from __future__ import annotations

import base64
import mimetypes
from pathlib import PurePath
from typing import TYPE_CHECKING

from daf_invite.exceptions import InvalidUploadError

if TYPE_CHECKING:
    from litestar.datastructures import UploadFile

ACCEPTED_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".svg"})
MAX_UPLOAD_BYTES = 5 * 1024 * 1024

mimetypes.add_type("image/svg+xml", ".svg")


def to_data_uri(payload: bytes, content_type: str) -> str:
    """Encode raw bytes as a base64 data-URI."""
    return f"data:{content_type};base64,{base64.b64encode(payload).decode('ascii')}"


async def read_upload_as_data_uri(upload: UploadFile, *, max_bytes: int = MAX_UPLOAD_BYTES) -> str:
    """Read an uploaded image into a data-URI.

    Args:
        upload: The uploaded file.
        max_bytes: Largest accepted payload.

    Returns:
        The image as a ``data:<type>;base64,...`` string.

    Raises:
        InvalidUploadError: If the file is not a png, jpg, gif or svg image,
            is empty, or is too large.
    """
    filename = upload.filename or "upload"
    extension = PurePath(filename).suffix.lower()
    if extension not in ACCEPTED_EXTENSIONS:
        raise InvalidUploadError(filename, f"unsupported extension {extension or '(none)'}")

    content_type = upload.content_type or ""
    if not content_type.startswith("image/"):
        content_type = mimetypes.guess_type(filename)[0] or ""
    if not content_type.startswith("image/"):
        raise InvalidUploadError(filename, "not an image")

    payload = await upload.read(max_bytes + 1)
    if not payload:
        raise InvalidUploadError(filename, "file is empty")
    if len(payload) > max_bytes:
        raise InvalidUploadError(filename, f"larger than {max_bytes} bytes")
    return to_data_uri(payload, content_type)
