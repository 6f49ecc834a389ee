"""
Process entry points.

`main()` runs the master: one worker per logical CPU, each worker binding
its own listening socket on the shared port (SO_REUSEPORT) so the kernel
spreads connections across them.
"""
import logging
import os
import socket

import uvicorn

from cpuapi.core.config import get_settings
from cpuapi.core.logging import configure_logging
from cpuapi.core.supervisor import Supervisor
from cpuapi.services.cpu_info import logical_cpu_count

logger = logging.getLogger(__name__)


def bind_socket(host: str, port: int, backlog: int = 2048) -> socket.socket:
    if not hasattr(socket, "SO_REUSEPORT"):
        raise RuntimeError("SO_REUSEPORT is not available on this platform, workers cannot share a port")

    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
        sock.bind((host, port))
        sock.listen(backlog)
    except OSError:
        sock.close()
        raise
    return sock


def run_worker(host: str, port: int, log_level: str = "INFO") -> None:
    configure_logging(log_level)
    settings = get_settings()
    sock = bind_socket(host, port, settings.BACKLOG)

    logger.info(f"Worker {os.getpid()} running on port {port}")
    logger.info(f"Swagger UI available at {settings.SERVER_URL}{settings.DOCS_URL}")

    from cpuapi.main import app

    config = uvicorn.Config(app=app, log_level=log_level.lower(), backlog=settings.BACKLOG)
    server = uvicorn.Server(config)
    server.run(sockets=[sock])


def worker_count() -> int:
    settings = get_settings()
    return settings.WORKERS if settings.WORKERS > 0 else logical_cpu_count()


def main() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    supervisor = Supervisor(
        target=run_worker,
        worker_count=worker_count(),
        args=(settings.HOST, settings.PORT, settings.LOG_LEVEL),
    )
    supervisor.run()


if __name__ == "__main__":
    main()
