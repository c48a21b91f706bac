import contextlib
import logging
import os
import re
import secrets
import time
from pathlib import Path, PurePosixPath

from starlette.concurrency import run_in_threadpool

from app.core.errors import MediaFault

logger = logging.getLogger(__name__)

# Intentos de generar un nombre libre antes de rendirse
MAX_NAME_ATTEMPTS = 5

# Solo extensiones simples (".png", ".jpeg"...); cualquier otra cosa se descarta
EXTENSION_RE = re.compile(r"^\.[a-z0-9]+$")


def clean_extension(original_name: str) -> str:
    ext = os.path.splitext(original_name or "")[1].lower()
    return ext if EXTENSION_RE.match(ext) else ""


class MediaStore:
    """
    Carpeta en disco con las portadas subidas.

    Las rutas que se devuelven son relativas y públicas ("img/<archivo>"),
    las mismas que se guardan en la columna imagen_url y que sirve /img.
    """

    def __init__(self, base_dir, url_prefix: str = "img"):
        self.base_dir = Path(base_dir)
        self.url_prefix = url_prefix.strip("/")

    def ensure_dir(self) -> None:
        # Idempotente: si ya existe no pasa nada
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def resolve(self, relative_path: str) -> Path:
        """Traduce "img/archivo.png" a la ruta real dentro de la carpeta."""
        parts = PurePosixPath(relative_path.replace("\\", "/")).parts
        if parts and parts[0] == self.url_prefix:
            parts = parts[1:]
        if len(parts) != 1 or parts[0] in ("", ".", ".."):
            raise MediaFault(f"Ruta de imagen no válida: {relative_path}")
        return self.base_dir / parts[0]

    async def store(self, data: bytes, original_name: str, fieldname: str = "image") -> str:
        """
        Guarda los bytes con un nombre único (timestamp + aleatorio) y
        devuelve la ruta relativa. La extensión original se conserva.
        """
        ext = clean_extension(original_name)
        try:
            filename = await run_in_threadpool(self._write_unique, data, fieldname, ext)
        except OSError as e:
            logger.error(f"No se pudo guardar la imagen '{original_name}': {e}")
            raise MediaFault(f"No se pudo guardar la imagen: {e}") from e
        logger.info(f"Imagen guardada: {filename} ({len(data)} bytes)")
        return f"{self.url_prefix}/{filename}"

    def _write_unique(self, data: bytes, fieldname: str, ext: str) -> str:
        self.ensure_dir()
        for _ in range(MAX_NAME_ATTEMPTS):
            unique_suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
            filename = f"{fieldname}-{unique_suffix}{ext}"
            path = self.base_dir / filename
            try:
                # "xb": falla si el archivo ya existe, así nunca se sobreescribe otro
                fh = open(path, "xb")
            except FileExistsError:
                continue
            try:
                with fh:
                    fh.write(data)
            except OSError:
                # No dejamos archivos a medias (p. ej. disco lleno)
                with contextlib.suppress(OSError):
                    path.unlink()
                raise
            return filename
        raise FileExistsError(f"No se encontró un nombre libre tras {MAX_NAME_ATTEMPTS} intentos")

    async def exists(self, relative_path: str) -> bool:
        try:
            path = self.resolve(relative_path)
        except MediaFault:
            return False
        return await run_in_threadpool(path.is_file)

    async def delete(self, relative_path: str) -> bool:
        """
        Borrado best-effort: si falla (archivo inexistente, permisos...)
        se registra y se devuelve False, nunca se lanza.
        """
        try:
            path = self.resolve(relative_path)
            await run_in_threadpool(os.remove, path)
        except (MediaFault, OSError) as e:
            logger.warning(f"No se pudo borrar la imagen '{relative_path}': {e}")
            return False
        logger.info(f"Imagen borrada: {relative_path}")
        return True
