# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Core   import HTTPException, Request, Response, FileResponse, Query
from .      import iptv_router
from httpx  import HTTPError
from ..Libs import ProxyServer, parse_m3u, write_playlist
import io, logging, os

logger = logging.getLogger(__name__)

M3U_MEDIA_TYPE = "audio/x-mpegurl"


@iptv_router.get("/iptv.m3u")
async def proxied_m3u(
    request: Request,
    username: str = Query(..., description="Proxy kullanıcı adı"),
    password: str = Query(..., description="Proxy şifresi")
):
    """
    Başlangıçta üretilen proxy'lenmiş M3U dosyası
    """
    server: ProxyServer = request.app.state.server

    if not server.authenticate(username, password):
        raise HTTPException(status_code=401, detail="Yetkisiz")

    if not os.path.exists(server.m3u_path):
        raise HTTPException(status_code=404, detail="Oynatma listesi boş")

    return FileResponse(path=server.m3u_path, media_type=M3U_MEDIA_TYPE, filename="iptv.m3u")


@iptv_router.get("/get.php")
async def xtream_get(
    request: Request,
    username: str = Query(..., description="Proxy kullanıcı adı"),
    password: str = Query(..., description="Proxy şifresi")
):
    """
    Xtream get.php - kaynak listesi Xtream kipinde yeniden yazılır
    """
    server: ProxyServer = request.app.state.server

    if not server.config.xtream_base_url:
        raise HTTPException(status_code=404, detail="Xtream kaynağı ayarlanmamış")

    if not server.authenticate(username, password):
        raise HTTPException(status_code=401, detail="Yetkisiz")

    params = dict(request.query_params)
    params.update(username=server.config.xtream_user, password=server.config.xtream_password)

    try:
        response = await request.app.state.session.get(server.xtream_url("get.php"), params=params, timeout=60)
        response.raise_for_status()
    except HTTPError as hata:
        logger.error("Xtream get.php indirilemedi: %s", hata)
        raise HTTPException(status_code=502, detail=f"Upstream error: {hata}") from hata

    playlist = parse_m3u(response.text)

    buffer = io.StringIO()
    write_playlist(buffer, playlist, server.rewriter, xtream=True)

    return Response(content=buffer.getvalue(), media_type=M3U_MEDIA_TYPE)
