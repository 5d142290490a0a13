"""
Entry point for the scanner API.

Usage:
    python -m triarb
    triarb  # if installed via pip
"""

import sys


# uvicorn runs on uvloop when it is installed
try:
    import uvloop  # noqa: F401

    UVLOOP_ENABLED = True
except ImportError:
    UVLOOP_ENABLED = False


def main() -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success).
    """
    import uvicorn
    from pydantic import ValidationError

    from triarb import __version__
    from triarb.config.settings import get_settings

    print(
        f"""
╔═══════════════════════════════════════════════════════════════╗
║     UNISWAP V3 TRIANGULAR ARBITRAGE SCANNER v{__version__:<17}║
║                                                               ║
║     Opportunity search for Arbitrum and Polygon               ║
╚═══════════════════════════════════════════════════════════════╝
    """
    )

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Configuration error: {e}")
        return 1

    print("Configuration:")
    print(f"  Provider:       {'SIMULATED' if settings.simulate else 'RPC'}")
    print(f"  Arbitrum RPC:   {settings.arbitrum_rpc}")
    print(f"  Polygon RPC:    {settings.polygon_rpc}")
    print(f"  Listening on:   http://{settings.host}:{settings.port}")
    print(f"  Path delay:     {settings.path_delay_ms}ms")
    print(f"  Concurrency:    {settings.max_concurrent_paths} path(s)")
    print(f"  uvloop:         {'Enabled' if UVLOOP_ENABLED and settings.use_uvloop else 'Disabled'}")
    print()

    uvicorn.run(
        "triarb.api.server:app",
        host=settings.host,
        port=settings.port,
        loop="uvloop" if UVLOOP_ENABLED and settings.use_uvloop else "asyncio",
        log_level="warning",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
