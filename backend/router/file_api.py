import os
import random
from pathlib import Path
from urllib.parse import quote, unquote_to_bytes

IMAGE_EXTENSIONS = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
}

def get_content_type(filename: str) -> str | None:
    return IMAGE_EXTENSIONS.get(Path(filename).suffix.lower())

def is_image_name(filename: str) -> bool:
    return get_content_type(filename) is not None

def list_available_images(directory: str | Path) -> list[str]:
    """Return the names of the supported image files directly inside `directory`.

    Subdirectories are skipped and the directory's own order is kept.
    Raises OSError when the directory cannot be read.
    """
    with os.scandir(directory) as entries:
        return [
            entry.name for entry in entries
            if entry.is_file() and is_image_name(entry.name)
        ]

def pick_random_image(images: list[str], rng: random.Random | None = None) -> str:
    if len(images) == 0:
        raise ValueError("No images to pick from")
    return (rng or random).choice(images)

def is_base_name(name: str) -> bool:
    '''True when `name` is a plain file name with no directory components.'''
    if name in ("", ".", "..") or "\x00" in name:
        return False
    return os.path.basename(name) == name and "/" not in name and "\\" not in name

def image_url(static_prefix: str, name: str) -> str:
    '''URL of an image under `static_prefix`, percent-encoding the raw file name bytes.'''
    return static_prefix + quote(os.fsencode(name), safe="")

def display_name(name: str) -> str:
    return os.fsencode(name).decode("utf-8", "replace")

def name_from_raw_path(raw_path: bytes, static_prefix: str) -> str | None:
    """Recover the file name from the undecoded request path.

    ASGI servers decode ``path`` as UTF-8, which loses names that are not
    valid UTF-8. Returns None when ``raw_path`` does not start with the prefix.
    """
    path = unquote_to_bytes(raw_path)
    prefix = static_prefix.encode()
    if not path.startswith(prefix):
        return None
    return os.fsdecode(path[len(prefix):])
