from types import MappingProxyType
from typing import Iterable, Mapping

from registry.models import Collection


class RegistryError(ValueError):
    pass


Registry = Mapping[str, Collection]

DEFAULT_COLLECTIONS = [
    Collection(
        id="teto",
        name="Kasane Teto",
        directory="/srv/http/downloaded_booru_images_api/kasane_teto",
        static_prefix="/teto/static/",
        random_path="/teto",
        web_page_name="teto-web.html",
        web_path="/teto-web",
    ),
    Collection(
        id="nso",
        name="Needy Streamer Overload",
        directory="/srv/http/downloaded_booru_images_api/needy_girl_overdose",
        static_prefix="/nso/static/",
        random_path="/nso",
        web_page_name="nso-web.html",
        web_path="/nso-web",
    ),
    Collection(
        id="public_http",
        name="Public HTTP Root",
        directory="/srv/http/",
        static_prefix="/public/",
    ),
]


def build_registry(collections: Iterable[Collection]) -> Registry:
    """Validate a set of collections and freeze them into a read-only mapping.

    Every route must belong to exactly one collection. A static prefix may
    not nest inside another one, and no random or viewer path may fall under
    a static prefix, otherwise one route would silently shadow another.
    """
    registry: dict[str, Collection] = {}
    owners: dict[str, str] = {}

    for collection in collections:
        if collection.id in registry:
            raise RegistryError(f"Duplicate collection id: {collection.id}")
        registry[collection.id] = collection

        for path in collection.routes():
            if path == "/":
                raise RegistryError(f"{collection.id}: '/' is reserved for the collection list")
            if path in owners:
                raise RegistryError(f"Route {path} claimed by both {owners[path]} and {collection.id}")
            owners[path] = collection.id

    prefixes = [(c.static_prefix, c.id) for c in registry.values()]
    for prefix, owner in prefixes:
        for other, other_owner in prefixes:
            if owner != other_owner and other.startswith(prefix):
                raise RegistryError(f"Static prefix {other} ({other_owner}) is shadowed by {prefix} ({owner})")

        for path, path_owner in owners.items():
            if path != prefix and path.startswith(prefix):
                raise RegistryError(f"Route {path} ({path_owner}) is shadowed by static prefix {prefix} ({owner})")

    return MappingProxyType(registry)
