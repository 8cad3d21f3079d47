# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from dotenv           import load_dotenv
from Public.IPTV.Libs import ProxyConfig
import os

load_dotenv()


def _bool(key: str, default: str = "false") -> bool:
    return os.getenv(key, default).strip().lower() in ("1", "true", "yes", "on")


HOST      = os.getenv("HOST", "0.0.0.0")
PORT      = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

PROXY_CONFIG = ProxyConfig(
    remote_url          = os.getenv("M3U_URL", ""),
    hostname            = os.getenv("PROXY_HOSTNAME", "localhost"),
    port                = PORT,
    advertised_port     = int(os.getenv("ADVERTISED_PORT", "0")),
    https               = _bool("HTTPS"),
    user                = os.getenv("PROXY_USER", "usertest"),
    password            = os.getenv("PROXY_PASSWORD", "passwordtest"),
    xtream_user         = os.getenv("XTREAM_USER", ""),
    xtream_password     = os.getenv("XTREAM_PASSWORD", ""),
    xtream_base_url     = os.getenv("XTREAM_BASE_URL", ""),
    custom_endpoint     = os.getenv("CUSTOM_ENDPOINT", ""),
    custom_id           = os.getenv("CUSTOM_ID", ""),
    hls_cache           = _bool("HLS_CACHE", "true"),
    hls_max_concurrency = int(os.getenv("HLS_MAX_CONCURRENCY", "0")),
)
