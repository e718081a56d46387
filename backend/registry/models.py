from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class Collection(BaseModel):
    '''A named image source: a directory plus the URL routes that expose it.

    Empty route strings disable that route.'''
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    directory: str
    static_prefix: str
    random_path: str = ""
    web_page_name: str = ""
    web_path: str = ""

    @field_validator("id", "name", "directory")
    @classmethod
    def not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("static_prefix", "random_path", "web_path")
    @classmethod
    def absolute_url_path(cls, value: str) -> str:
        if value and not value.startswith("/"):
            raise ValueError(f"URL path must start with '/': {value!r}")
        return value

    @field_validator("static_prefix")
    @classmethod
    def trailing_slash(cls, value: str) -> str:
        if not value.endswith("/"):
            raise ValueError(f"static prefix must end with '/': {value!r}")
        return value

    @model_validator(mode="after")
    def viewer_pair(self) -> "Collection":
        if bool(self.web_path) != bool(self.web_page_name):
            raise ValueError("web_path and web_page_name must be set together")
        return self

    def routes(self) -> list[str]:
        '''URL paths claimed by this collection, skipping disabled ones.'''
        return [path for path in (self.random_path, self.static_prefix, self.web_path) if path]
