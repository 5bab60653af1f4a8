import argparse
import asyncio
import os
from typing import Any, Optional

import aiohttp_jinja2
import jinja2
from aiohttp import web

from .config import Base, Endianness, GroupSize, HexdumpBuilder, HexdumpConfig
from .hexdump import Hexdump

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
TEMPLATE_DIR = os.path.join(PACKAGE_DIR, "templates")
STATIC_DIR = os.path.join(PACKAGE_DIR, "static")


def config_from_query(request: web.Request) -> HexdumpConfig:
    # query parameters override the configuration the app was started with
    q = request.query
    builder = HexdumpBuilder(request.app["config"])
    try:
        if "base" in q:
            builder.base(Base(int(q["base"])))
        if "group" in q:
            builder.group_size(GroupSize(int(q["group"])))
        if "groups" in q:
            builder.groups_per_line(int(q["groups"]))
        if "endian" in q:
            builder.endianness(Endianness(q["endian"]))
        if "squeeze" in q:
            builder.hide_duplicates(q["squeeze"] not in ("", "0", "false"))
        return builder.config()
    except ValueError as ex:
        raise web.HTTPBadRequest(text=str(ex))


def number_from_query(request: web.Request, key: str) -> Optional[int]:
    if key not in request.query:
        return None
    try:
        value = int(request.query[key], 0)
    except ValueError as ex:
        raise web.HTTPBadRequest(text=str(ex))
    if value < 0:
        raise web.HTTPBadRequest(text=f"{key} must not be negative: {value}")
    return value


async def format_dump(request: web.Request) -> str:
    config = config_from_query(request)
    offset = number_from_query(request, "offset") or 0
    length = number_from_query(request, "length")
    rhx = Hexdump(config)
    # formatting a large file is cpu bound, keep it off the event loop
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, rhx.dumps, request.app["data"], offset, length
    )


@aiohttp_jinja2.template("dump.jinja2")
async def handle_dump(request: web.Request) -> Any:
    dump = await format_dump(request)
    return {
        "name": request.app["name"],
        "config": config_from_query(request),
        "dump": dump.rstrip("\n"),
    }


async def handle_raw(request: web.Request) -> Any:
    return web.Response(text=await format_dump(request))


def get_web_app(
    data: bytes, config: Optional[HexdumpConfig] = None, name: str = ""
) -> web.Application:
    app = web.Application()
    aiohttp_jinja2.setup(app, loader=jinja2.FileSystemLoader(TEMPLATE_DIR))
    app.router.add_get("/", handle_dump)
    app.router.add_get("/raw", handle_raw)
    app.router.add_static("/static", STATIC_DIR)

    app["data"] = bytes(data)
    app["config"] = config if config is not None else HexdumpConfig()
    app["name"] = name
    return app


async def start_server(
    data: bytes,
    web_port: int,
    config: Optional[HexdumpConfig] = None,
    name: str = "",
    host: str = "",
) -> web.AppRunner:
    """
    Serve a dump of `data` on `web_port` until the returned runner is
    cleaned up. Port 0 picks a free port.
    """
    runner = web.AppRunner(get_web_app(data, config, name))
    await runner.setup()
    await web.TCPSite(runner, host, web_port).start()
    print(f"Serving hexdump of {name or 'data'} on {web_port}")
    return runner


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("file", help="file to serve a hexdump of")
    parser.add_argument("--web-port", help="web port", default=8080, type=int)
    args = parser.parse_args()

    print(f"reading {args.file}")
    with open(args.file, "rb") as f:
        blob = f.read()

    web.run_app(get_web_app(blob, name=os.path.basename(args.file)), port=args.web_port)
