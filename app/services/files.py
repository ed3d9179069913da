import base64
from typing import Optional

from fastapi import HTTPException, UploadFile, status

from app.core.config import settings


def upload_mime_type(upload: UploadFile) -> str:
    """Bare MIME type of an upload, without parameters such as ``; name=...``."""
    return (upload.content_type or "").split(";")[0].strip().lower()


def is_image_upload(upload: Optional[UploadFile]) -> bool:
    if upload is None or not upload.filename:
        return False
    return upload_mime_type(upload).startswith("image/")


def bytes_to_data_uri(content: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


async def upload_to_data_uri(
    upload: UploadFile, max_bytes: Optional[int] = None
) -> str:
    """
    Reads an uploaded image and returns it as a base64 data URI, the form the
    model accepts inline images in.
    """
    if not is_image_upload(upload):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please select an image file.",
        )

    limit = max_bytes if max_bytes is not None else settings.MAX_IMAGE_UPLOAD_BYTES
    content = await upload.read()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="The selected image is empty.",
        )
    if len(content) > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Image is too large. Maximum size is {limit // (1024 * 1024)} MB.",
        )
    return bytes_to_data_uri(content, upload_mime_type(upload))
