import uvicorn

from .config import settings

if __name__ == "__main__":
    uvicorn.run("exopredict.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
