from pathlib import Path

from registry import Collection


def write_file(folder: Path, filename: str, content: bytes = b"") -> Path:
    path = folder / filename
    path.write_bytes(content)
    assert path.is_file(), "write failed"
    return path


def make_collection(directory: Path, id: str = "teto", **kwargs) -> Collection:
    fields = dict(
        id=id,
        name=kwargs.pop("name", id.title()),
        directory=str(directory),
        static_prefix=f"/{id}/static/",
        random_path=f"/{id}",
        web_page_name=f"{id}-web.html",
        web_path=f"/{id}-web",
    )
    fields.update(kwargs)
    return Collection(**fields)


def links(html: str) -> list[str]:
    '''hrefs in the order they appear'''
    hrefs = []
    for part in html.split('href="')[1:]:
        hrefs.append(part.split('"', 1)[0])
    return hrefs
