# SPDX-License-Identifier: Apache-2.0
"""
Main entry point for the inventory MCP server.

Exit status is 0 when the client closes the stdio stream, 1 when the server
cannot start or an asynchronous fault escapes every invocation.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from dotenv import load_dotenv

from ..exceptions import InventoryBridgeError
from .app import serve
from .config import Settings, load_settings

logger = logging.getLogger(__name__)


class FatalAsyncFault(RuntimeError):
    """An exception surfaced by the event loop outside any awaited task."""


async def run(settings: Settings) -> None:
    """Serve until the stream closes, aborting on the first unhandled loop fault."""
    loop = asyncio.get_running_loop()
    fault: asyncio.Future = loop.create_future()

    def on_fault(loop: asyncio.AbstractEventLoop, context: dict) -> None:
        exc = context.get("exception")
        message = context.get("message") or repr(exc)
        logger.critical(f"Unhandled asynchronous fault: {message}", exc_info=exc)
        if not fault.done():
            fault.set_exception(FatalAsyncFault(message))

    loop.set_exception_handler(on_fault)
    server_task = asyncio.create_task(serve(settings))

    done, _ = await asyncio.wait({server_task, fault}, return_when=asyncio.FIRST_COMPLETED)
    if fault in done:
        server_task.cancel()
        await asyncio.gather(server_task, return_exceptions=True)
        fault.result()
    else:
        fault.cancel()
        server_task.result()


def main() -> None:
    """Main entry point"""
    load_dotenv()
    logging.basicConfig(
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level)
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except InventoryBridgeError as e:
        logger.critical(f"Failed to start server: {e}")
        sys.exit(1)
    except Exception:
        logger.exception("Inventory MCP Server terminated abnormally")
        sys.exit(1)


if __name__ == "__main__":
    main()
