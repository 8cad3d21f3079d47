# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Settings import HOST, PORT, LOG_LEVEL
import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "Core:kekik_FastAPI",
        host      = HOST,
        port      = PORT,
        log_level = LOG_LEVEL.lower(),
    )
