"""NeuroLoop server entry point: ``python -m neuroloop.core.server.main``.

The transport comes from ``NEUROLOOP_TRANSPORT``. Over ``stdio`` the server
is reachable only by the process that spawned it, so the bind guard applies
to the HTTP transport alone.
"""

from __future__ import annotations

import logging
from ipaddress import ip_address

from neuroloop.core.config.settings import Settings, get_settings
from neuroloop.core.server.app import create_app

HTTP_TRANSPORT = "streamable-http"
STDIO_TRANSPORT = "stdio"

logger = logging.getLogger(__name__)


def _is_loopback_host(host: str) -> bool:
    if host == "localhost":
        return True
    try:
        return ip_address(host).is_loopback
    except ValueError:
        return False


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(level=getattr(logging, level_name.upper(), logging.INFO))


def _check_bind(settings: Settings) -> None:
    if settings.neuroloop_allow_insecure_bind or _is_loopback_host(settings.neuroloop_host):
        return
    raise RuntimeError(
        f"Refusing to bind the scoring server to non-loopback host "
        f"{settings.neuroloop_host!r} without an auth layer. "
        "Set NEUROLOOP_ALLOW_INSECURE_BIND=true to override (unsafe)."
    )


def run() -> None:
    """Start the NeuroLoop scoring MCP server on the configured transport."""
    settings = get_settings()
    _configure_logging(settings.neuroloop_log_level)

    transport = settings.neuroloop_transport
    if transport == STDIO_TRANSPORT:
        logger.info("Starting NeuroLoop scoring server over stdio")
        create_app().run(transport=STDIO_TRANSPORT)
        return
    if transport != HTTP_TRANSPORT:
        raise ValueError(
            f"Unsupported NEUROLOOP_TRANSPORT {transport!r}; "
            f"expected {HTTP_TRANSPORT!r} or {STDIO_TRANSPORT!r}"
        )

    _check_bind(settings)
    logger.info(
        "Starting NeuroLoop scoring server on %s:%d",
        settings.neuroloop_host,
        settings.neuroloop_port,
    )
    create_app().run(
        transport=HTTP_TRANSPORT,
        host=settings.neuroloop_host,
        port=settings.neuroloop_port,
    )


if __name__ == "__main__":
    run()
