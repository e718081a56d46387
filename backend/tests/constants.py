PNG_IMAGE = "a.png"
JPG_IMAGE = "b.jpg"
JPEG_IMAGE = "c.JPEG"
GIF_IMAGE = "d.gif"
TEXT_FILE = "readme.txt"
SUBFOLDER = "folder"

IMAGES = [PNG_IMAGE, JPG_IMAGE]

TETO_PREFIX = "/teto/static/"
TETO_RANDOM = "/teto"
TETO_WEB = "/teto-web"
TETO_WEB_PAGE = "teto-web.html"

PUBLIC_PREFIX = "/public/"

# magic bytes only, images are never decoded
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
JPG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 32
GIF_BYTES = b"GIF89a" + b"\x00" * 32
