"""HTTP endpoint that receives a report from a running harness."""

import asyncio
import logging

from aiohttp import web
from pydantic import ValidationError

from app_test_harness.models.payload import ReportPayload
from app_test_harness.models.result import Report

log = logging.getLogger(__name__)

RECEIVED_KEY = web.AppKey("received", asyncio.Future)


async def handle_report(request: web.Request) -> web.Response:
    """Accept a report and resolve the collector's pending future."""
    try:
        payload = ReportPayload.model_validate(await request.json())
    except (ValueError, ValidationError) as e:
        log.warning("Rejected malformed report: %s", e)
        return web.json_response({"error": str(e)}, status=400)

    received: asyncio.Future[Report] = request.app[RECEIVED_KEY]
    if received.done():
        log.warning("Ignoring additional report")
        return web.json_response({"error": "report already received"}, status=409)

    received.set_result(payload.to_report())
    log.info("Received report with %d result(s)", payload.total_count)
    return web.json_response({"status": "ok"})


def create_app(received: "asyncio.Future[Report]") -> web.Application:
    """Create the collector application."""
    app = web.Application()
    app[RECEIVED_KEY] = received
    app.router.add_post("/report", handle_report)
    return app


async def collect_report(host: str, port: int, timeout: float) -> Report:
    """Listen until a harness posts its report.

    Args:
        host: Interface to bind
        port: Port to bind
        timeout: Maximum wait time in seconds

    Returns:
        The received report

    Raises:
        TimeoutError: If no report arrives within timeout

    """
    received: asyncio.Future[Report] = asyncio.get_event_loop().create_future()
    runner = web.AppRunner(create_app(received))
    await runner.setup()
    try:
        site = web.TCPSite(runner, host, port)
        await site.start()
        log.info("Waiting for report on http://%s:%d/report", host, port)
        return await asyncio.wait_for(received, timeout)
    finally:
        await runner.cleanup()
