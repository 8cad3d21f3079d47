import asyncio

import pytest
from fastapi import FastAPI

import Core.Modules as modules
from Public.IPTV.Libs import LoadError, ProxyConfig


def test_load_error_aborts_startup(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(modules, "PROXY_CONFIG", ProxyConfig(remote_url=str(tmp_path / "yok.m3u")))
    app = FastAPI()

    async def run():
        async with modules.lifespan(app):
            pass

    with pytest.raises(LoadError):
        asyncio.run(run())

    assert not hasattr(app.state, "server")


def test_startup_builds_proxied_file(tmp_path, monkeypatch):
    liste = tmp_path / "liste.m3u"
    liste.write_text("#EXTM3U\n#EXTINF:-1,Kanal\nhttp://origin.example/k.ts\n", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(modules, "PROXY_CONFIG", ProxyConfig(remote_url=str(liste), hostname="proxy.local"))
    app = FastAPI()

    async def run():
        async with modules.lifespan(app):
            with open(app.state.server.m3u_path, encoding="utf-8") as dosya:
                return dosya.read()

    assert "http://proxy.local:8080/a6d7e846/usertest/passwordtest/0/k.ts" in asyncio.run(run())
    assert (tmp_path / "hlsdownloads").is_dir()
