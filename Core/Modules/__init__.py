# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from contextlib       import asynccontextmanager
from fastapi          import FastAPI
from httpx            import AsyncClient as AsyncSession
from Settings         import PROXY_CONFIG
from Public.IPTV.Libs import ProxyServer, DOWNLOAD_DIR
import logging, os

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Başlangıçta listeyi yükle ve proxy dosyasını üret; hata olursa başlatma iptal"""
    async with AsyncSession(follow_redirects=True) as session:
        server = await ProxyServer.create(PROXY_CONFIG, session)
        server.playlist_initialization()
        os.makedirs(DOWNLOAD_DIR, exist_ok=True)

        app.state.session = session
        app.state.server  = server

        logger.info("IPTV proxy hazır » %s:%d", PROXY_CONFIG.hostname, PROXY_CONFIG.advertised_port)
        yield
