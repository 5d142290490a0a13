"""
FastAPI server for the scanner.

Exposes scans, explicit path analysis and catalog/health introspection.
Configuration errors map to 400, hops without liquidity to 422, and any
other failure to 500 with a remediation tip.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import orjson
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from triarb import __version__
from triarb.api.models import AnalyzePathBody, ScanBody
from triarb.config.settings import get_settings
from triarb.core.errors import ConfigurationError, NoLiquidityError
from triarb.core.scanner import ScanService
from triarb.telemetry.logger import setup_logging


logger = logging.getLogger(__name__)

SCAN_ERROR_TIP = "Try reducing amount or using a simpler strategy"
ANALYZE_ERROR_TIP = "Check that pools exist for each hop at the requested fee tiers"


class OrjsonResponse(JSONResponse):
    """JSON response rendered with orjson (non-finite floats become null)."""

    def render(self, content: Any) -> bytes:
        return orjson.dumps(content, option=orjson.OPT_NON_STR_KEYS)


def error_response(status_code: int, message: str, tip: str | None = None) -> OrjsonResponse:
    body: dict[str, Any] = {"error": message}
    if tip:
        body["tip"] = tip
    return OrjsonResponse(body, status_code=status_code)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if app.state.scanner is not None:
        yield
        return

    settings = get_settings()
    async_logger = setup_logging(settings.log_level, settings.log_file)
    app.state.scanner = ScanService.from_settings(settings)
    logger.info(
        f"Scanner ready ({'simulated' if settings.simulate else 'rpc'} provider, "
        f"networks: {', '.join(app.state.scanner.catalog.network_ids)})"
    )
    try:
        yield
    finally:
        await app.state.scanner.close()
        app.state.scanner = None
        async_logger.stop()


def get_scanner(request: Request) -> ScanService:
    scanner: ScanService = request.app.state.scanner
    return scanner


# =============================================================================
# Routes
# =============================================================================


async def scan(body: ScanBody, scanner: ScanService = Depends(get_scanner)) -> OrjsonResponse:
    try:
        report = await scanner.scan(body.to_request())
    except ConfigurationError:
        raise
    except Exception as e:
        logger.exception(f"Scan failed on {body.network}")
        return error_response(500, str(e), tip=SCAN_ERROR_TIP)
    return OrjsonResponse(report.to_dict())


async def analyze_path(
    body: AnalyzePathBody,
    scanner: ScanService = Depends(get_scanner),
) -> OrjsonResponse:
    try:
        analysis = await scanner.analyze_path(body.to_request())
    except (ConfigurationError, NoLiquidityError):
        raise
    except Exception as e:
        logger.exception(f"Path analysis failed on {body.network}")
        return error_response(500, str(e), tip=ANALYZE_ERROR_TIP)
    return OrjsonResponse({"analysis": analysis.to_dict()})


async def get_tokens(network: str, scanner: ScanService = Depends(get_scanner)) -> OrjsonResponse:
    return OrjsonResponse(scanner.list_tokens(network))


async def get_strategies(scanner: ScanService = Depends(get_scanner)) -> OrjsonResponse:
    return OrjsonResponse({"strategies": scanner.list_strategies()})


async def get_health(scanner: ScanService = Depends(get_scanner)) -> OrjsonResponse:
    return OrjsonResponse(await scanner.health())


# =============================================================================
# Exception Handlers
# =============================================================================


async def handle_configuration_error(request: Request, exc: Exception) -> OrjsonResponse:
    return error_response(400, str(exc))


async def handle_no_liquidity(request: Request, exc: Exception) -> OrjsonResponse:
    return error_response(422, str(exc))


def create_app(scanner: ScanService | None = None) -> FastAPI:
    """
    Create the API application.

    Args:
        scanner: Pre-built scan service. When omitted, one is built from
            settings on startup and closed on shutdown.
    """
    app = FastAPI(
        title="Uniswap V3 Triangular Arbitrage Scanner",
        version=__version__,
        lifespan=lifespan,
        default_response_class=OrjsonResponse,
    )
    app.state.scanner = scanner

    app.post("/scan")(scan)
    app.post("/analyze-path")(analyze_path)
    app.get("/tokens/{network}")(get_tokens)
    app.get("/strategies")(get_strategies)
    app.get("/health")(get_health)

    app.add_exception_handler(ConfigurationError, handle_configuration_error)
    app.add_exception_handler(NoLiquidityError, handle_no_liquidity)
    return app


app = create_app()
