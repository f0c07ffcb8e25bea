# storefront/upload/routes.py
import os
import uuid

from flask import current_app, jsonify, request, send_from_directory
from werkzeug.utils import secure_filename

from . import bp
from ..errors import ValidationError
from ..utils.decorators import admin_required

ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "gif", "webp"}
DEFAULT_EXTENSION = "jpg"


def _extension(filename: str) -> str:
    name = secure_filename(filename or "")
    if "." not in name:
        return DEFAULT_EXTENSION
    return name.rsplit(".", 1)[1].lower()


def save_upload(file_storage) -> str:
    """Store the payload under a random name and return its public URL. Content is not inspected."""
    if not file_storage:
        raise ValidationError("no file")
    ext = _extension(file_storage.filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise ValidationError("Unsupported file type")

    filename = f"{uuid.uuid4().hex}.{ext}"
    upload_dir = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(upload_dir, exist_ok=True)
    file_storage.save(os.path.join(upload_dir, filename))

    current_app.logger.info("upload: stored %s", filename)
    prefix = current_app.config.get("UPLOAD_URL_PREFIX", "/uploads").rstrip("/")
    return f"{prefix}/{filename}"


# POST /api/upload  (multipart field "image")
@bp.post("/api/upload")
@admin_required
def upload_image():
    url = save_upload(request.files.get("image"))
    return jsonify(url=url)


# GET /uploads/<filename>
@bp.get("/uploads/<path:filename>")
def uploaded_file(filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)
