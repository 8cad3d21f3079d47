# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from urllib.parse import urljoin
from httpx        import AsyncClient as AsyncSession, HTTPError
from .models      import SegmentMapping
from .errors      import NetworkError, FileSystemError
import asyncio, logging, os

logger = logging.getLogger(__name__)

DOWNLOAD_DIR = "hlsdownloads"


def clean_filename(url: str) -> str:
    """URL'nin son parçası, `?` ve sonrası atılır"""
    base = url.rstrip("/").rsplit("/", 1)[-1]
    return base.split("?", 1)[0]


async def fetch_segment(mapping: SegmentMapping, session: AsyncSession, base_uri: str | None = None) -> str:
    """
    Segmenti indirip önbellek dizinine yaz, yerel yolu döndür
    """
    url      = urljoin(base_uri, mapping.original_uri) if base_uri else mapping.original_uri
    filename = os.path.join(DOWNLOAD_DIR, clean_filename(mapping.original_uri))

    try:
        async with session.stream("GET", url, follow_redirects=True) as response:
            response.raise_for_status()

            # disk işleri event loop dışında, kardeş görevler beklemez
            try:
                await asyncio.to_thread(os.makedirs, DOWNLOAD_DIR, exist_ok=True)
                dosya = await asyncio.to_thread(open, filename, "wb")
                try:
                    async for chunk in response.aiter_bytes():
                        await asyncio.to_thread(dosya.write, chunk)
                finally:
                    await asyncio.to_thread(dosya.close)
            except OSError as hata:
                raise FileSystemError(f"{filename} yazılamadı: {hata}") from hata
    except HTTPError as hata:
        raise NetworkError(f"{url} indirilemedi: {hata}") from hata

    return f"/{filename}"


async def download_segment(mapping: SegmentMapping, session: AsyncSession, base_uri: str | None = None) -> SegmentMapping | None:
    """
    Tek segment görevi; başarısızlık loglanır, kardeş görevleri etkilemez
    """
    try:
        mapping.downloaded_uri = await fetch_segment(mapping, session, base_uri)
    except (NetworkError, FileSystemError) as hata:
        logger.error("Segment atlandı: %s", hata)
        return None

    return mapping
