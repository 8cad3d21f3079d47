import io

import pytest

from Public.IPTV.Libs import ProxyConfig, Playlist, Track, Tag, URLRewriter, ProxyServer, WriteError, write_playlist


def test_extinf_format(config, playlist):
    buffer = io.StringIO()

    assert write_playlist(buffer, playlist, URLRewriter(config)) == 2
    assert buffer.getvalue() == (
        "#EXTM3U\n"
        '#EXTINF:-1 tvg-id="k1" group-title="Ulusal", Kanal 1\n'
        "http://proxy.local:8080/a6d7e846/u1/p1/0/stream1.ts\n"
        "#EXTINF:-1 , Kanal 2\n"
        "http://proxy.local:8080/a6d7e846/u1/p1/1/stream2.m3u8\n"
    )


def test_tag_values_are_quoted():
    track  = Track(name="X", length=10, tags=[Tag("tvg-name", 'a "b"')], uri="http://o/x.ts")
    buffer = io.StringIO()

    write_playlist(buffer, Playlist(tracks=[track]), URLRewriter(ProxyConfig(hostname="h", port=1)))

    assert '#EXTINF:10 tvg-name="a \\"b\\"", X' in buffer.getvalue()


def test_failed_track_does_not_consume_index(config):
    playlist = Playlist(tracks=[
        Track(name="A", length=-1, uri="http://o/a.ts"),
        Track(name="B", length=-1, uri="http://[bozuk"),
        Track(name="C", length=-1, uri="http://o/c.ts"),
    ])
    buffer = io.StringIO()

    write_playlist(buffer, playlist, URLRewriter(config))

    assert [track.name for track in playlist.tracks] == ["A", "C"]
    assert playlist.tracks[0].proxied_uri.endswith("/0/a.ts")
    assert playlist.tracks[1].proxied_uri.endswith("/1/c.ts")
    assert "bozuk" not in buffer.getvalue()


def test_zero_track_playlist_writes_nothing(config, tmp_path):
    path   = tmp_path / "iptv.m3u"
    server = ProxyServer(config, Playlist(), m3u_path=str(path))

    assert server.playlist_initialization() is False
    assert not path.exists()


def test_playlist_initialization_writes_file(config, playlist, tmp_path):
    path   = tmp_path / "iptv.m3u"
    server = ProxyServer(config, playlist, m3u_path=str(path))

    assert server.playlist_initialization() is True

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "#EXTM3U"
    assert lines[2] == "http://proxy.local:8080/a6d7e846/u1/p1/0/stream1.ts"
    assert server.track(1).name == "Kanal 2"
    assert server.track(2) is None


def test_default_m3u_path_is_unique(config):
    assert ProxyServer(config).m3u_path != ProxyServer(config).m3u_path


def test_unwritable_proxy_file_is_a_write_error(config, playlist, tmp_path):
    server = ProxyServer(config, playlist, m3u_path=str(tmp_path / "yok" / "iptv.m3u"))

    with pytest.raises(WriteError):
        server.playlist_initialization()
