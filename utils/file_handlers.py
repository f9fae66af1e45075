from typing import Optional
from fastapi import UploadFile
from config.settings import MAX_ATTACHMENT_BYTES, ALLOWED_ATTACHMENT_TYPES
from core.text_processing import human_file_size
from models.contact import Attachment

FILE_TOO_LARGE = "File size must be less than 5MB"
FILE_TYPE_NOT_SUPPORTED = "File type not supported. Please upload images, PDFs, or documents."


class AttachmentRejected(Exception):
    pass


def check_attachment(filename: str, content_type: Optional[str], content: bytes) -> Attachment:
    """Build an Attachment or raise AttachmentRejected with a user-facing reason."""
    size = len(content)
    if size > MAX_ATTACHMENT_BYTES:
        raise AttachmentRejected(FILE_TOO_LARGE)

    content_type = (content_type or "").split(";")[0].strip().lower()
    if content_type not in ALLOWED_ATTACHMENT_TYPES:
        raise AttachmentRejected(FILE_TYPE_NOT_SUPPORTED)

    return Attachment(
        filename=filename or "attachment",
        content_type=content_type,
        content=content,
        size=size,
        size_label=human_file_size(size),
    )


async def read_upload(file: UploadFile) -> bytes:
    """Read an upload, stopping one byte past the limit so oversized files are not buffered whole."""
    content = await file.read(MAX_ATTACHMENT_BYTES + 1)
    await file.close()
    return content
