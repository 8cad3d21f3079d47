import asyncio

import httpx
import pytest

from conftest import mock_session
from Public.IPTV.Libs import LoadError, parse_m3u, load_playlist

M3U = """#EXTM3U
#EXTINF:-1 tvg-id="trt1" group-title="Ulusal, HD",TRT 1
http://origin.example/live/trt1.m3u8

#EXTVLCOPT:http-user-agent=Test
#EXTINF:120,Film
http://origin.example/movie/film.mp4
"""


def test_parse_keeps_order_tags_and_names():
    playlist = parse_m3u(M3U)

    assert [track.name for track in playlist.tracks] == ["TRT 1", "Film"]
    assert [(tag.name, tag.value) for tag in playlist.tracks[0].tags] == [("tvg-id", "trt1"), ("group-title", "Ulusal, HD")]
    assert playlist.tracks[1].length == 120
    assert playlist.tracks[1].uri == "http://origin.example/movie/film.mp4"


def test_missing_header_is_a_load_error():
    with pytest.raises(LoadError):
        parse_m3u("#EXTINF:-1,X\nhttp://o/x.ts\n")


def test_bad_length_is_a_load_error():
    with pytest.raises(LoadError):
        parse_m3u("#EXTM3U\n#EXTINF:abc,X\nhttp://o/x.ts\n")


def test_empty_address_gives_empty_playlist():
    assert len(asyncio.run(load_playlist(""))) == 0


def test_remote_playlist_is_fetched():
    async def run():
        async with mock_session(lambda request: httpx.Response(200, text=M3U)) as session:
            return await load_playlist("http://origin.example/get.m3u", session)

    assert len(asyncio.run(run())) == 2


def test_remote_error_is_a_load_error():
    async def run():
        async with mock_session(lambda request: httpx.Response(404)) as session:
            await load_playlist("http://origin.example/yok.m3u", session)

    with pytest.raises(LoadError):
        asyncio.run(run())


def test_local_file(tmp_path):
    path = tmp_path / "liste.m3u"
    path.write_text(M3U, encoding="utf-8")

    assert asyncio.run(load_playlist(str(path))).tracks[0].name == "TRT 1"


def test_missing_local_file_is_a_load_error(tmp_path):
    with pytest.raises(LoadError):
        asyncio.run(load_playlist(str(tmp_path / "yok.m3u")))
