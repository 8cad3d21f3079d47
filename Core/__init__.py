# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from fastapi                 import FastAPI, Request, Response, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from Core.Modules            import lifespan
from fastapi.staticfiles     import StaticFiles
from fastapi.responses       import JSONResponse, FileResponse, StreamingResponse
from Settings                import LOG_LEVEL
from Public.IPTV.Libs        import DOWNLOAD_DIR
import logging

logging.basicConfig(
    level   = LOG_LEVEL,
    format  = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt = "%H:%M:%S"
)

kekik_FastAPI = FastAPI(
    title       = "Kekik-IPTV-Proxy",
    openapi_url = None,
    docs_url    = None,
    redoc_url   = None,
    lifespan    = lifespan
)

# ! ----------------------------------------» Middlewares

kekik_FastAPI.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])
kekik_FastAPI.add_middleware(GZipMiddleware, minimum_size=1000)

# ! ----------------------------------------» Routers

from Core.Modules        import _hata
from Public.IPTV.Routers import iptv_router

kekik_FastAPI.mount(f"/{DOWNLOAD_DIR}", StaticFiles(directory=DOWNLOAD_DIR, check_dir=False), name="hls_downloads")
kekik_FastAPI.include_router(iptv_router)
