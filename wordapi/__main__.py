import uvicorn

from .config import get_settings
from .main import application


def main():
    settings = get_settings()
    uvicorn.run(application, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == '__main__':
    main()
