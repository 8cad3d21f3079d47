import sys
from pathlib import Path

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from Public.IPTV.Libs import ProxyConfig, Playlist, Track, Tag


@pytest.fixture
def config():
    return ProxyConfig(
        hostname        = "proxy.local",
        port            = 8080,
        user            = "u1",
        password        = "p1",
        xtream_user     = "olduser",
        xtream_password = "oldpass",
        xtream_base_url = "http://origin.example",
    )


@pytest.fixture
def playlist():
    return Playlist(tracks=[
        Track(name="Kanal 1", length=-1, tags=[Tag("tvg-id", "k1"), Tag("group-title", "Ulusal")], uri="http://origin.example/path/stream1.ts"),
        Track(name="Kanal 2", length=-1, tags=[], uri="http://origin.example/path/stream2.m3u8"),
    ])


@pytest.fixture
def cache_dir(tmp_path, monkeypatch):
    # segment cache is relative to the working directory
    monkeypatch.chdir(tmp_path)
    return tmp_path / "hlsdownloads"


def mock_session(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
