# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Core                 import kekik_FastAPI, Request, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from Public.IPTV.Libs     import ProxyError
import logging

logger = logging.getLogger(__name__)

@kekik_FastAPI.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(request: Request, exc):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

@kekik_FastAPI.exception_handler(ProxyError)
async def proxy_exception_handler(request: Request, exc: ProxyError):
    """İstek sırasında yakalanmamış proxy hataları upstream hatası sayılır"""
    logger.error("%s » %s", request.url.path, exc)

    return JSONResponse(status_code=502, content={"detail": str(exc)})
