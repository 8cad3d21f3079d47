# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Core                 import HTTPException, Request, Response, StreamingResponse
from .                    import iptv_router
from httpx                import HTTPError
from starlette.background import BackgroundTask
from typing               import Literal
from ..Libs               import ProxyServer, absolutize_m3u8, cache_m3u8
import logging

logger = logging.getLogger(__name__)

HEADERS = {
    "Accept"     : "*/*",
    "User-Agent" : "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
}

NO_CACHE = {"Cache-Control": "no-cache, no-store, must-revalidate"}


def _is_m3u8(url: str, content_type: str) -> bool:
    return "mpegurl" in content_type.lower() or url.split("?", 1)[0].endswith(".m3u8")


async def relay_stream(request: Request, url: str) -> Response:
    """
    Kaynak akışı istemciye aktar; HLS MEDIA listeleri segment önbelleğinden geçer
    """
    server: ProxyServer = request.app.state.server
    session             = request.app.state.session

    try:
        upstream = await session.send(session.build_request("GET", url, headers=HEADERS), stream=True, follow_redirects=True)
    except HTTPError as hata:
        logger.error("Kaynağa ulaşılamadı » %s : %s", url, hata)
        raise HTTPException(status_code=502, detail=f"Upstream error: {hata}") from hata

    if upstream.status_code != 200:
        await upstream.aclose()
        raise HTTPException(
            status_code = upstream.status_code,
            detail      = f"Upstream error: {upstream.status_code}"
        )

    content_type = upstream.headers.get("content-type", "application/octet-stream")

    if not _is_m3u8(str(upstream.url), content_type):
        return StreamingResponse(
            upstream.aiter_raw(),
            media_type = content_type,
            background = BackgroundTask(upstream.aclose),
        )

    try:
        content = (await upstream.aread()).decode("utf-8", errors="replace")
    except HTTPError as hata:
        raise HTTPException(status_code=502, detail=f"Upstream error: {hata}") from hata
    finally:
        await upstream.aclose()

    # göreli URI'ler kaynak liste adresine göre mutlak olur
    base_url = str(upstream.url)
    content  = absolutize_m3u8(content, base_url)

    if server.config.hls_cache:
        content = await cache_m3u8(content, session, base_uri=base_url, max_concurrency=server.config.hls_max_concurrency)

    return Response(content=content, media_type="application/vnd.apple.mpegurl", headers=NO_CACHE)


@iptv_router.get("/{token}/{username}/{password}/{index}/{basename}")
async def track_proxy(request: Request, token: str, username: str, password: str, index: int, basename: str):
    """
    M3U parça proxy'si - URL'deki indeks proxy listesindeki sırayı gösterir
    """
    server: ProxyServer = request.app.state.server

    if token != server.anti_collision:
        raise HTTPException(status_code=404, detail="Bulunamadı")

    if not server.authenticate(username, password):
        raise HTTPException(status_code=401, detail="Yetkisiz")

    track = server.track(index)
    if track is None:
        raise HTTPException(status_code=404, detail=f"{index} numaralı parça yok")

    return await relay_stream(request, track.uri)


@iptv_router.get("/{kind}/{username}/{password}/{stream}")
async def xtream_stream_proxy(request: Request, kind: Literal["live", "movie", "series"], username: str, password: str, stream: str):
    """
    Xtream akış proxy'si - kimlik bilgileri kaynak hesabıyla değiştirilir
    """
    server: ProxyServer = request.app.state.server

    if not server.config.xtream_base_url:
        raise HTTPException(status_code=404, detail="Xtream kaynağı ayarlanmamış")

    if not server.authenticate(username, password):
        raise HTTPException(status_code=401, detail="Yetkisiz")

    return await relay_stream(request, server.xtream_stream_url(kind, stream))
