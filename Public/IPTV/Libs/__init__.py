# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .errors        import ProxyError, LoadError, RewriteError, WriteError, NetworkError, FileSystemError
from .models        import Tag, Track, Playlist, SegmentMapping, ProxyConfig, DEFAULT_ANTI_COLLISION
from .m3u_loader    import parse_m3u, load_playlist
from .url_rewriter  import URLRewriter
from .marshaller    import write_playlist
from .segment_cache import clean_filename, download_segment, DOWNLOAD_DIR
from .rewrite_m3u8  import absolutize_m3u8, download_segments, download_segments_from_playlist, cache_m3u8
from .server        import ProxyServer
