"""Entry point: python -m dissectproxy."""

import logging

import uvicorn

from dissectproxy.server import create_app
from dissectproxy.settings import ProxySettings


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = ProxySettings.from_env()
    app = create_app(settings=settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
