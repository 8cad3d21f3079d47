# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from dataclasses import dataclass, field
from pydantic    import BaseModel, Field, model_validator

DEFAULT_ANTI_COLLISION = "a6d7e846"


@dataclass
class Tag:
    name: str
    value: str


@dataclass
class Track:
    name: str
    length: int
    tags: list[Tag] = field(default_factory=list)
    uri: str        = ""
    proxied_uri: str = ""


@dataclass
class Playlist:
    tracks: list[Track] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tracks)


@dataclass
class SegmentMapping:
    original_uri: str
    downloaded_uri: str = ""


class ProxyConfig(BaseModel):
    """Proxy'nin dışa dönük ve kaynağa dönük tüm ayarları"""

    remote_url: str          = ""
    hostname: str            = "localhost"
    port: int                = Field(8080, gt=0, lt=65536)
    advertised_port: int     = Field(0, ge=0, lt=65536)
    https: bool              = False
    user: str                = "usertest"
    password: str            = "passwordtest"
    xtream_user: str         = ""
    xtream_password: str     = ""
    xtream_base_url: str     = ""
    custom_endpoint: str     = ""
    custom_id: str           = ""
    hls_cache: bool          = True
    hls_max_concurrency: int = Field(0, ge=0)

    @model_validator(mode="after")
    def _advertised_port_default(self):
        if not self.advertised_port:
            self.advertised_port = self.port

        return self

    @property
    def endpoint_prefix(self) -> str:
        """`/custom` biçiminde yol öneki, ayarlanmamışsa boş"""
        trimmed = self.custom_endpoint.strip("/")
        return f"/{trimmed}" if trimmed else ""

    @property
    def anti_collision(self) -> str:
        return self.custom_id.strip("/") or DEFAULT_ANTI_COLLISION
