# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

class ProxyError(Exception):
    """IPTV proxy hatalarının ortak atası"""


class LoadError(ProxyError):
    """Uzak oynatma listesi indirilemedi ya da ayrıştırılamadı"""


class WriteError(ProxyError):
    """Proxy'lenmiş M3U dosyası yazılamadı"""


class NetworkError(ProxyError):
    """Segment indirilirken ağ hatası"""


class FileSystemError(ProxyError):
    """Segment önbelleğine yazılamadı"""


class RewriteError(ProxyError):
    MALFORMED_URI    = "MalformedURI"
    COMPOSE_FAILURE  = "ComposeFailure"

    def __init__(self, kind: str, uri: str, reason: str = ""):
        self.kind   = kind
        self.uri    = uri
        self.reason = reason
        super().__init__(f"{kind}: {uri!r} {reason}".rstrip())
