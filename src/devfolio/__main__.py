# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Hitalo M. <https://github.com/HitaloM>

from __future__ import annotations

import argparse
import logging

import anyio
from aiohttp import web

from .config import BlogSettings
from .container import setup_dependencies
from .logging import get_logger, setup_logging
from .web import create_app

logger = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Devfolio blog API")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args()


async def main() -> None:
    settings = BlogSettings()

    app = create_app()
    setup_dependencies(app, settings)

    runner = web.AppRunner(app)
    await runner.setup()
    try:
        site = web.TCPSite(runner, settings.host, settings.port)
        await site.start()
        await logger.ainfo("Serving blog API", host=settings.host, port=settings.port)
        await anyio.sleep_forever()
    finally:
        await runner.cleanup()


def run() -> None:
    args = parse_args()
    log_level = logging.DEBUG if args.debug else logging.INFO
    setup_logging(level=log_level)
    anyio.run(main, backend="asyncio", backend_options={"use_uvloop": True})


if __name__ == "__main__":
    run()
