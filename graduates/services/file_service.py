import base64
import binascii
import enum
from io import BytesIO
from pathlib import Path

from flask import current_app
from PIL import Image
from werkzeug.utils import secure_filename


class StorageFolder(enum.Enum):
    SHORTS = "shorts"
    PROFILE_PHOTOS = "profile-photos"
    CVS = "cvs"
    TRANSCRIPTS = "transcripts"
    FILES = "files"


IMAGE_FOLDERS = {StorageFolder.PROFILE_PHOTOS}

EXTENSIONS_BY_MIME = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "video/mp4": "mp4",
    "video/webm": "webm",
    "video/quicktime": "mov",
    "application/pdf": "pdf",
}


class FileService:
    @staticmethod
    def _split_payload(payload):
        """Accepts either a bare base64 string or a ``data:<mime>;base64,`` URL."""
        if payload.startswith("data:") and "base64," in payload:
            header, encoded = payload.split("base64,", 1)
            mime = header[len("data:"):].split(";", 1)[0].strip().lower()
            return EXTENSIONS_BY_MIME.get(mime, "bin"), encoded
        return "bin", payload

    @staticmethod
    def _image_extension(raw):
        img = Image.open(BytesIO(raw))
        img.verify()
        fmt = (img.format or "").lower()
        return "jpg" if fmt == "jpeg" else fmt or "bin"

    @classmethod
    def upload_as_base64_string(cls, payload, name, folder, upload_root=None):
        """Store a base64 payload under ``<upload_root>/<folder>/``.

        Returns the stored path relative to the upload root, or ``None`` when
        the payload is empty, undecodable, not an image where one is expected,
        or cannot be written.
        """
        folder = StorageFolder(folder)
        if not payload or not payload.strip():
            current_app.logger.warning("Upload rejected: empty payload for %s", folder.value)
            return None

        extension, encoded = cls._split_payload(payload.strip())
        try:
            raw = base64.b64decode("".join(encoded.split()), validate=True)
        except (binascii.Error, ValueError):
            current_app.logger.warning("Upload rejected: payload for %s is not valid base64", folder.value)
            return None
        if not raw:
            current_app.logger.warning("Upload rejected: payload for %s decoded to nothing", folder.value)
            return None

        if folder in IMAGE_FOLDERS:
            # Verify actual image bytes to avoid extension spoofing.
            try:
                extension = cls._image_extension(raw)
            except Exception as exc:
                current_app.logger.warning("Upload rejected: invalid image for %s (%s)", folder.value, exc)
                return None

        filename = secure_filename(f"{name}.{extension}")
        target_dir = Path(upload_root or current_app.config["UPLOAD_DIR"]) / folder.value
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            (target_dir / filename).write_bytes(raw)
        except OSError as exc:
            current_app.logger.warning("Upload failed writing %s: %s", filename, exc)
            return None

        return f"{folder.value}/{filename}"
