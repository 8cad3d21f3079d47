# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from urllib.parse   import urljoin
from httpx          import AsyncClient as AsyncSession
from .models        import SegmentMapping
from .segment_cache import download_segment
import asyncio, logging, m3u8, re

logger = logging.getLogger(__name__)

URI_ATTRIBUTE = re.compile(r'URI="([^"]+)"')


def absolutize_uri_attribute(line: str, base_url: str) -> str:
    """
    EXT-X-KEY, EXT-X-MAP gibi satırlardaki URI attribute'unu kaynağa göre mutlak yap
    """
    return URI_ATTRIBUTE.sub(lambda match: f'URI="{urljoin(base_url, match.group(1))}"', line)


def absolutize_m3u8(content: str, base_url: str) -> str:
    """
    M3U8 içindeki göreli URL'leri kaynak listenin adresine göre mutlak yap
    """
    result = []

    for line in content.split("\n"):
        stripped = line.strip()

        if not stripped or stripped.startswith("#"):
            if "URI=" in stripped:
                stripped = absolutize_uri_attribute(stripped, base_url)
            result.append(stripped)
            continue

        result.append(urljoin(base_url, stripped))

    return "\n".join(result)


async def download_segments(mappings: list[SegmentMapping], session: AsyncSession, base_uri: str | None = None, max_concurrency: int = 0) -> None:
    """
    Her segment için ayrı görev başlat, hepsi bitene kadar bekle.

    `max_concurrency` sıfırsa sınır yoktur.
    """
    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency > 0 else None

    async def task(mapping: SegmentMapping) -> SegmentMapping | None:
        # her görev kendi kaydı üzerinde çalışır
        private = SegmentMapping(original_uri=mapping.original_uri)
        if semaphore is None:
            return await download_segment(private, session, base_uri)

        async with semaphore:
            return await download_segment(private, session, base_uri)

    results = await asyncio.gather(*(task(mapping) for mapping in mappings))

    for downloaded in results:
        if downloaded is None:
            continue

        for mapping in mappings:
            if mapping.original_uri == downloaded.original_uri:
                mapping.downloaded_uri = downloaded.downloaded_uri
                break

    basarili = sum(1 for mapping in mappings if mapping.downloaded_uri)
    logger.info("%d/%d segment önbelleğe alındı", basarili, len(mappings))


async def download_segments_from_playlist(playlist: m3u8.M3U8, session: AsyncSession, base_uri: str | None = None, max_concurrency: int = 0) -> m3u8.M3U8:
    """
    MEDIA listesindeki segmentleri indirip URI'lerini yerel yollarla değiştir
    """
    if playlist.is_variant:
        logger.warning("Yalnızca MEDIA tipindeki listeler destekleniyor, liste olduğu gibi döndürülüyor")
        return playlist

    # aynı URI tek önbellek kaydına düşer
    uris     = dict.fromkeys(segment.uri for segment in playlist.segments if segment is not None and segment.uri)
    mappings = [SegmentMapping(original_uri=uri) for uri in uris]

    await download_segments(mappings, session, base_uri, max_concurrency)

    for segment in playlist.segments:
        if segment is None:
            continue

        for mapping in mappings:
            if segment.uri != mapping.original_uri:
                continue

            if mapping.downloaded_uri:
                segment.uri = mapping.downloaded_uri
            elif base_uri:
                # indirilemeyen segment kaynaktan oynatılabilsin
                segment.uri = urljoin(base_uri, mapping.original_uri)
            break

    return playlist


async def cache_m3u8(content: str, session: AsyncSession, base_uri: str | None = None, max_concurrency: int = 0) -> str:
    """
    HLS metnini ayrıştır, segmentleri önbelleğe al, yeni metni döndür
    """
    playlist = m3u8.loads(content)
    playlist = await download_segments_from_playlist(playlist, session, base_uri, max_concurrency)

    return content if playlist.is_variant else playlist.dumps()
