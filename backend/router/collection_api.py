import logging
import stat
from email.utils import parsedate
from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse, RedirectResponse
from starlette.staticfiles import NotModifiedResponse

from registry import Collection
from router.file_api import (
    display_name,
    get_content_type,
    image_url,
    is_base_name,
    list_available_images,
    name_from_raw_path,
    pick_random_image,
)
from router.pages import render_page

logger = logging.getLogger(__name__)


def list_images_or_500(collection: Collection) -> list[str]:
    try:
        return list_available_images(collection.directory)
    except OSError as e:
        logger.error("Error listing available images for %s: %s", collection.name, e)
        raise HTTPException(status_code=500, detail="Internal Server Error: Could not list images.")


def is_not_modified(response: FileResponse, request: Request) -> bool:
    '''Evaluate If-None-Match, then If-Modified-Since, against the file headers.'''
    if_none_match = request.headers.get("if-none-match")
    etag = response.headers.get("etag")
    if if_none_match is not None and if_none_match.strip() == "*":
        return True
    if if_none_match is not None and etag is not None:
        return etag in [tag.strip(" W/") for tag in if_none_match.split(",")]

    if_modified_since = request.headers.get("if-modified-since")
    last_modified = response.headers.get("last-modified")
    if if_modified_since is not None and last_modified is not None:
        since = parsedate(if_modified_since)
        modified = parsedate(last_modified)
        return since is not None and modified is not None and since >= modified

    return False


def create_router(collection: Collection, viewer_dir: Path) -> APIRouter:
    """Build the random, static and viewer routes of one collection.

    Each handler re-reads the collection directory on every request, so
    results always follow what is currently on disk.
    """
    router = APIRouter(tags=[collection.id])

    def random_image():
        images = list_images_or_500(collection)

        if len(images) == 0:
            logger.warning("No images found in %s", collection.directory)
            raise HTTPException(status_code=404, detail="No images found.")

        redirect_url = image_url(collection.static_prefix, pick_random_image(images))
        logger.info("Redirecting to: %s for a random %s image", redirect_url, collection.name)
        return RedirectResponse(url=redirect_url, status_code=302)

    def static_index():
        images = list_images_or_500(collection)

        if len(images) == 0:
            logger.info("No images found in %s to display in index.", collection.directory)

        entries = [
            {"url": image_url(collection.static_prefix, image), "name": display_name(image)}
            for image in images
        ]
        response = render_page("index.html", collection=collection, images=entries)
        logger.info("Served image index page for %s", collection.static_prefix)
        return response

    def static_file(name: str, request: Request):
        raw_path = request.scope.get("raw_path")
        if raw_path is not None:
            name = name_from_raw_path(raw_path, collection.static_prefix) or name

        if name == "":
            return static_index()

        if not is_base_name(name):
            logger.warning("Attempted path traversal: %s", name)
            raise HTTPException(status_code=400, detail="Bad Request: Invalid image name.")

        image_path = Path(collection.directory) / name

        content_type = get_content_type(name)
        if content_type is None:
            logger.info("Unsupported image type requested: %s (path: %s)", Path(name).suffix, image_path)
            raise HTTPException(status_code=404, detail="Not Found")

        try:
            file_stat = image_path.stat()
        except (FileNotFoundError, NotADirectoryError):
            logger.info("Image file not found: %s", image_path)
            raise HTTPException(status_code=404, detail="Not Found")
        except OSError as e:
            logger.error("Error opening image file %s: %s", image_path, e)
            raise HTTPException(status_code=500, detail="Internal Server Error: Could not open image file.")

        if not stat.S_ISREG(file_stat.st_mode):
            logger.info("Image path is not a file: %s", image_path)
            raise HTTPException(status_code=404, detail="Not Found")

        # FileResponse opens the file while sending and closes it on every path
        response = FileResponse(path=image_path, media_type=content_type, stat_result=file_stat)
        if is_not_modified(response, request):
            logger.info("Not modified: %s", image_path)
            return NotModifiedResponse(response.headers)

        logger.info("Served static %s image: %s", collection.name, display_name(name))
        return response

    def web_page():
        page = viewer_dir / collection.web_page_name
        try:
            page_stat = page.stat()
        except FileNotFoundError:
            logger.warning("HTML file not found: %s", page)
            raise HTTPException(status_code=404, detail="Not Found")
        except OSError as e:
            logger.error("Error checking HTML file %s: %s", page, e)
            raise HTTPException(status_code=500, detail="Internal Server Error: Could not check HTML file.")

        if not stat.S_ISREG(page_stat.st_mode):
            logger.warning("HTML page is not a file: %s", page)
            raise HTTPException(status_code=404, detail="Not Found")

        logger.info("Served HTML page: %s at %s", collection.web_page_name, collection.web_path)
        return FileResponse(path=page, media_type="text/html")

    if collection.random_path:
        router.add_api_route(collection.random_path, random_image, methods=["GET", "HEAD"])
    router.add_api_route(collection.static_prefix + "{name:path}", static_file, methods=["GET", "HEAD"])
    if collection.web_path:
        router.add_api_route(collection.web_path, web_page, methods=["GET", "HEAD"])

    return router
