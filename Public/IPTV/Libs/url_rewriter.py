# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from urllib.parse import urlsplit, quote
from .models      import ProxyConfig
from .errors      import RewriteError
import re

CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
VALID_HOST    = re.compile(r"^(\[[0-9A-Fa-f:.]+\]|[A-Za-z0-9._~\-%]+)$")


def path_escape(value: str) -> str:
    """Tek bir yol parçası için kaçış, `/ ; , ?` dahil"""
    return quote(value, safe="$&+:=@")


def escaped_path(path: str) -> str:
    """Yolun kaçışlı hali, mevcut `%XX` kaçışları korunur"""
    return quote(path, safe="/%!$&'()*+,;=:@~")


def path_base(path: str) -> str:
    """Yolun son parçası, sondaki eğik çizgiler yok sayılır"""
    path = path.rstrip("/")
    if not path:
        return ""

    return path.rsplit("/", 1)[-1]


class URLRewriter:
    """
    Kaynak URL'lerini proxy URL'lerine dönüştürür.

    Anti-çakışma ve özel uç nokta parçaları kurulumda bir kez çözülür,
    nesnenin ömrü boyunca değişmez.
    """

    def __init__(self, config: ProxyConfig):
        self.config          = config
        self.scheme          = "https" if config.https else "http"
        self.anti_collision  = config.anti_collision
        self.endpoint_prefix = config.endpoint_prefix

    def rewrite(self, uri: str, track_index: int, xtream: bool = False) -> str:
        if not uri or CONTROL_CHARS.search(uri):
            raise RewriteError(RewriteError.MALFORMED_URI, uri, "boş ya da kontrol karakteri içeriyor")

        try:
            origin = urlsplit(uri)
        except ValueError as hata:
            raise RewriteError(RewriteError.MALFORMED_URI, uri, str(hata)) from hata

        uri_path = escaped_path(origin.path)
        user     = path_escape(self.config.user)
        password = path_escape(self.config.password)

        if xtream:
            if self.config.xtream_user:
                uri_path = uri_path.replace(path_escape(self.config.xtream_user), user)
            if self.config.xtream_password:
                uri_path = uri_path.replace(path_escape(self.config.xtream_password), password)
        else:
            parts    = [self.anti_collision, user, password, str(track_index)]
            basename = path_base(uri_path)
            if basename and basename != ".":
                parts.append(basename)
            uri_path = "/" + "/".join(parts)

        # user:pass@ kaynaktaki haliyle korunur
        netloc    = origin.netloc
        user_info = netloc.rpartition("@")[0] + "@" if "@" in netloc else ""

        new_uri = f"{self.scheme}://{user_info}{self.config.hostname}:{self.config.advertised_port}{self.endpoint_prefix}{uri_path}"

        return self._validate(new_uri)

    def _validate(self, new_uri: str) -> str:
        if CONTROL_CHARS.search(new_uri):
            raise RewriteError(RewriteError.COMPOSE_FAILURE, new_uri, "kontrol karakteri")

        try:
            parsed = urlsplit(new_uri)
            port   = parsed.port
        except ValueError as hata:
            raise RewriteError(RewriteError.COMPOSE_FAILURE, new_uri, str(hata)) from hata

        host = parsed.netloc.rpartition("@")[2].rsplit(":", 1)[0]
        if port is None or not VALID_HOST.match(host):
            raise RewriteError(RewriteError.COMPOSE_FAILURE, new_uri, "geçersiz host")

        return parsed.geturl()
