# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from httpx         import AsyncClient as AsyncSession
from .models       import ProxyConfig, Playlist, Track
from .url_rewriter import URLRewriter, path_escape
from .marshaller   import write_playlist
from .m3u_loader   import load_playlist
from .errors       import WriteError
import logging, os, secrets, tempfile, uuid

logger = logging.getLogger(__name__)


def default_m3u_path() -> str:
    return os.path.join(tempfile.gettempdir(), f"{uuid.uuid4()}.iptv-proxy.m3u")


class ProxyServer:
    """
    Bir ProxyConfig için yüklenmiş liste, URL dönüştürücü ve proxy'lenmiş
    M3U dosyasının yolu.
    """

    def __init__(self, config: ProxyConfig, playlist: Playlist | None = None, m3u_path: str | None = None):
        self.config   = config
        self.playlist = playlist or Playlist()
        self.rewriter = URLRewriter(config)
        self.m3u_path = m3u_path or default_m3u_path()

    @classmethod
    async def create(cls, config: ProxyConfig, session: AsyncSession | None = None, m3u_path: str | None = None) -> "ProxyServer":
        playlist = await load_playlist(config.remote_url, session)
        return cls(config, playlist, m3u_path)

    @property
    def anti_collision(self) -> str:
        return self.rewriter.anti_collision

    def playlist_initialization(self) -> bool:
        """
        Proxy'lenmiş M3U dosyasını üret; liste boşsa dosya oluşturulmaz
        """
        if not self.playlist.tracks:
            logger.info("Oynatma listesi boş, proxy dosyası oluşturulmadı")
            return False

        try:
            with open(self.m3u_path, "w", encoding="utf-8") as dosya:
                written = write_playlist(dosya, self.playlist, self.rewriter)
                dosya.flush()
                os.fsync(dosya.fileno())
        except OSError as hata:
            raise WriteError(f"{self.m3u_path} yazılamadı: {hata}") from hata

        logger.info("%d parça %s dosyasına yazıldı", written, self.m3u_path)
        return True

    def track(self, index: int) -> Track | None:
        if 0 <= index < len(self.playlist.tracks):
            return self.playlist.tracks[index]

        return None

    def authenticate(self, user: str, password: str) -> bool:
        user_ok     = secrets.compare_digest(user.encode(), self.config.user.encode())
        password_ok = secrets.compare_digest(password.encode(), self.config.password.encode())

        return user_ok and password_ok

    def xtream_url(self, *segments: str) -> str:
        """Kaynak Xtream sunucusunda `segments` yolunun tam URL'si"""
        return "/".join([self.config.xtream_base_url.rstrip("/"), *(segment.strip("/") for segment in segments)])

    def xtream_stream_url(self, kind: str, stream: str) -> str:
        """Proxy kimlik bilgileri yerine kaynak Xtream kimlik bilgileriyle akış URL'si"""
        return self.xtream_url(kind, path_escape(self.config.xtream_user), path_escape(self.config.xtream_password), stream)
