"""
Shared test helpers for uploads and stored files
"""
import io
import os
import tempfile

from starlette.datastructures import Headers, UploadFile

UPLOAD_ROOT = tempfile.mkdtemp(prefix="igloo-uploads-")
ADMIN_KEY = "test-admin-key"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def make_upload(data: bytes = PNG_BYTES, filename: str = "sheet.png", content_type: str = "image/png") -> UploadFile:
    """Build an upload object like the ones FastAPI hands to endpoints"""
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


def image_part(data: bytes = PNG_BYTES, filename: str = "sheet.png", content_type: str = "image/png") -> dict:
    """``files=`` argument for a multipart request carrying an image"""
    return {"image": (filename, io.BytesIO(data), content_type)}


def stored_files() -> list:
    return sorted(os.listdir(UPLOAD_ROOT))


def file_for(image_url: str) -> str:
    return os.path.join(UPLOAD_ROOT, image_url.rsplit("/", 1)[-1])
