# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from httpx   import AsyncClient as AsyncSession, HTTPError
from .models import Playlist, Track, Tag
from .errors import LoadError
import logging, re

logger = logging.getLogger(__name__)

TAG_PATTERN = re.compile(r'([^\s=",]+)="([^"]*)"')


def _split_info(info: str) -> tuple[str, str]:
    """`-1 tvg-id="x", İsim` satırını tırnak dışındaki ilk virgülden böl"""
    in_quote = False
    for i, char in enumerate(info):
        if char == '"':
            in_quote = not in_quote
        elif char == "," and not in_quote:
            return info[:i], info[i + 1:].strip()

    return info, ""


def parse_m3u(content: str) -> Playlist:
    """
    M3U metnini sıralı Track listesine dönüştür
    """
    lines = [line.strip() for line in content.splitlines()]
    lines = [line for line in lines if line]

    if not lines or not lines[0].startswith("#EXTM3U"):
        raise LoadError("Geçersiz m3u dosyası, #EXTM3U başlığı bekleniyordu")

    playlist = Playlist()
    current  = None

    for line in lines[1:]:
        if line.startswith("#EXTINF:"):
            info, name = _split_info(line[len("#EXTINF:"):])
            length, _, attrs = info.strip().partition(" ")

            try:
                length = int(float(length))
            except ValueError as hata:
                raise LoadError(f"Geçersiz parça süresi: {line}") from hata

            current = Track(
                name   = name,
                length = length,
                tags   = [Tag(name=key, value=value) for key, value in TAG_PATTERN.findall(attrs)],
            )
            continue

        if line.startswith("#"):
            continue

        if current is None:
            raise LoadError(f"#EXTINF olmadan URI: {line}")

        current.uri = line
        playlist.tracks.append(current)
        current = None

    return playlist


async def load_playlist(address: str, session: AsyncSession | None = None) -> Playlist:
    """
    Uzak (http/https) ya da yerel M3U adresini indirip ayrıştır
    """
    if not address:
        return Playlist()

    if address.startswith(("http://", "https://")):
        try:
            if session is None:
                async with AsyncSession() as own_session:
                    response = await own_session.get(address, follow_redirects=True, timeout=30)
            else:
                response = await session.get(address, follow_redirects=True, timeout=30)

            response.raise_for_status()
        except HTTPError as hata:
            raise LoadError(f"{address} indirilemedi: {hata}") from hata

        content = response.text
    else:
        try:
            with open(address, encoding="utf-8") as dosya:
                content = dosya.read()
        except OSError as hata:
            raise LoadError(f"{address} okunamadı: {hata}") from hata

    playlist = parse_m3u(content)
    logger.info("%s adresinden %d parça yüklendi", address, len(playlist))

    return playlist
