"""
Armazenamento das imagens enviadas pelo painel.
O arquivo é salvo em IMAGES_DIR com nome aleatório e a URL pública
retornada é o que o painel grava na lista de imagens da propriedade.
"""
import logging
import os
import uuid
from typing import Tuple

import aiofiles
from fastapi import UploadFile

from app.core.config import settings
from app.core.exceptions import ImageUploadError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp"}
CHUNK_SIZE = 1024 * 1024
IMAGES_URL_PREFIX = "/api/images"


def images_dir() -> str:
    os.makedirs(settings.IMAGES_DIR, exist_ok=True)
    return settings.IMAGES_DIR


def validar_tipo(file: UploadFile) -> str:
    """Valida extensão e content-type; retorna a extensão normalizada"""
    ext = os.path.splitext(file.filename or "")[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise ImageUploadError(
            f"File type '{ext or 'unknown'}' not allowed. Allowed types: jpg, jpeg, png, webp."
        )
    if file.content_type and not file.content_type.startswith("image/"):
        raise ImageUploadError(f"Content type '{file.content_type}' is not an image.")
    return ext


def validar_filename(filename: str) -> str:
    """Impede path traversal ao servir imagens"""
    if not filename or os.path.basename(filename) != filename or filename.startswith("."):
        raise ImageUploadError("Invalid file name.")
    return filename


async def save_image(file: UploadFile) -> Tuple[str, str]:
    """
    Grava o upload em disco

    Returns:
        (filename, url) do arquivo salvo
    """
    ext = validar_tipo(file)
    max_bytes = settings.MAX_FILE_SIZE_MB * 1024 * 1024
    filename = f"{uuid.uuid4().hex}{ext}"
    dest = os.path.join(images_dir(), filename)

    written = 0
    try:
        async with aiofiles.open(dest, "wb") as out:
            while True:
                chunk = await file.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > max_bytes:
                    raise ImageUploadError(
                        f"File exceeds maximum allowed size of {settings.MAX_FILE_SIZE_MB} MB."
                    )
                await out.write(chunk)
    except Exception:
        if os.path.exists(dest):
            os.remove(dest)
        raise

    if written == 0:
        os.remove(dest)
        raise ImageUploadError("Uploaded file is empty.")

    logger.info(f"Imagem salva: {filename} ({written} bytes)")
    return filename, f"{IMAGES_URL_PREFIX}/{filename}"


def image_path(filename: str) -> str:
    return os.path.join(settings.IMAGES_DIR, validar_filename(filename))
