# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from typing        import TextIO
from .models       import Playlist, Track
from .url_rewriter import URLRewriter
from .errors       import RewriteError
import logging

logger = logging.getLogger(__name__)

M3U_HEADER = "#EXTM3U\n"


def quote_value(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def extinf_line(track: Track) -> str:
    tags = " ".join(f"{tag.name}={quote_value(tag.value)}" for tag in track.tags)
    return f"#EXTINF:{track.length} {tags}, {track.name}"


def write_playlist(into: TextIO, playlist: Playlist, rewriter: URLRewriter, xtream: bool = False) -> int:
    """
    Oynatma listesini proxy URL'leriyle `into` akışına yaz.

    URL'si dönüştürülemeyen parça hem çıktıdan hem bellekteki listeden
    düşürülür; indeks yalnızca yazılan parçalar üzerinden ilerler.
    """
    kept = []
    into.write(M3U_HEADER)

    for track in playlist.tracks:
        try:
            uri = rewriter.rewrite(track.uri, len(kept), xtream)
        except RewriteError as hata:
            logger.error("parça: %s: %s", track.name, hata)
            continue

        track.proxied_uri = uri
        into.write(f"{extinf_line(track)}\n{uri}\n")
        kept.append(track)

    dropped = len(playlist.tracks) - len(kept)
    if dropped:
        logger.warning("%d parça dönüştürülemediği için listeden çıkarıldı", dropped)

    playlist.tracks = kept

    return len(kept)
