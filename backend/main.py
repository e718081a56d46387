import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI

from middleware import PermissiveCORSMiddleware
from registry import DEFAULT_COLLECTIONS, Registry, build_registry
from router import collection_api
from router.pages import render_page

logger = logging.getLogger(__name__)

HOST = "0.0.0.0"
PORT = 5003

def check_collections(registry: Registry, viewer_dir: Path) -> list[str]:
    '''Warn about collections whose directory or viewer page is missing.'''
    warnings = []
    for collection_id, collection in registry.items():
        directory = Path(collection.directory)
        if not directory.exists():
            warnings.append(f"Image directory '{directory}' for {collection.name} does not exist. The {collection_id} endpoints might not work.")
        elif not directory.is_dir():
            warnings.append(f"Image directory '{directory}' for {collection.name} is not a directory. The {collection_id} endpoints might not work.")

        if collection.web_page_name:
            page = viewer_dir / collection.web_page_name
            if not page.is_file():
                warnings.append(f"HTML file '{page}' not found. The {collection.web_path} endpoint might not work.")

    for warning in warnings:
        logger.warning("Warning: %s", warning)
    return warnings

def log_endpoints(registry: Registry, port: int = PORT):
    logger.info("Visit http://localhost:%s/ to see all available image collections", port)
    for collection in registry.values():
        logger.info("  %s:", collection.name)
        if collection.random_path:
            logger.info("    Random: http://localhost:%s%s", port, collection.random_path)
        logger.info("    Index:  http://localhost:%s%s", port, collection.static_prefix)
        if collection.web_path:
            logger.info("    Web:    http://localhost:%s%s", port, collection.web_path)

def create_app(registry: Registry | None = None, viewer_dir: Path | None = None) -> FastAPI:
    if registry is None:
        registry = build_registry(DEFAULT_COLLECTIONS)
    if viewer_dir is None:
        viewer_dir = Path.cwd()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        check_collections(registry, viewer_dir)
        log_endpoints(registry)

        yield

    app = FastAPI(lifespan=lifespan)

    for collection in registry.values():
        app.include_router(collection_api.create_router(collection, viewer_dir))

    app.add_middleware(PermissiveCORSMiddleware)

    @app.api_route("/", methods=["GET", "HEAD"])
    def read_root():
        return render_page("collections.html", collections=list(registry.values()))

    return app

app = create_app()

def run():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting server on port %s", PORT)
    uvicorn.run(app, host=HOST, port=PORT)

if __name__ == "__main__":
    run()
