# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from fastapi  import APIRouter
from Settings import PROXY_CONFIG

iptv_router = APIRouter(prefix=PROXY_CONFIG.endpoint_prefix)

from . import playlist, proxy
