"""
jaildash command line launcher.

Usage:
    jaildash freenas.local 80 -P secret
    jaildash 10.0.0.2 443 --secure -u root -P secret -H 0.0.0.0 -p 8000

Every option defaults to its JAILDASH_* environment variable (see
jaildash.config), so the password can be passed as JAILDASH_PASSWORD instead of
on the command line.
"""

import argparse
import logging
from typing import List, Optional

from jaildash import __version__
from jaildash.client import JailApiClient
from jaildash.config import DashboardConfig
from jaildash.logging_config import setup_logging
from jaildash.poller import JailPoller
from jaildash.service import create_app
from jaildash.snapshot import Snapshot

logger = logging.getLogger(__name__)


def build_parser(defaults: DashboardConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jaildash",
        description="Status dashboard for FreeNAS/TrueNAS jails and plugins",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "host",
        nargs="?",
        default=defaults.host,
        help=f"FreeNAS/TrueNAS host (default: {defaults.host})"
    )
    parser.add_argument(
        "port",
        nargs="?",
        type=int,
        default=defaults.port,
        help=f"FreeNAS/TrueNAS port (default: {defaults.port})"
    )
    parser.add_argument(
        "-u", "--user",
        default=defaults.user,
        help=f"Web UI root user (default: {defaults.user})"
    )
    parser.add_argument(
        "-P", "--password",
        default=defaults.password,
        help="Web UI root password (required, or set $JAILDASH_PASSWORD)"
    )
    parser.add_argument(
        "-H", "--bind-host",
        default=defaults.bind_host,
        help=f"IP address to bind to (default: {defaults.bind_host})"
    )
    parser.add_argument(
        "-p", "--bind-port",
        type=int,
        default=defaults.bind_port,
        help=f"Port to bind to (default: {defaults.bind_port})"
    )
    parser.add_argument(
        "-s", "--secure",
        action="store_true",
        default=defaults.secure,
        help="Connect using HTTPS"
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=defaults.poll_interval,
        help=f"Seconds between refreshes (default: {defaults.poll_interval:g})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=defaults.request_timeout,
        help=f"Timeout for API requests in seconds (default: {defaults.request_timeout:g})"
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help=f"Logging level (default: {defaults.log_level})"
    )
    parser.add_argument(
        "--log-file",
        default=defaults.log_file,
        help="Also write logs to this file"
    )
    return parser


def parse_config(argv: Optional[List[str]] = None) -> DashboardConfig:
    """Parse argv into a validated DashboardConfig; exits with status 2 on bad input."""
    parser = build_parser(DashboardConfig.from_env())
    args = parser.parse_args(argv)

    config = DashboardConfig(
        password=args.password,
        host=args.host,
        port=args.port,
        user=args.user,
        secure=args.secure,
        bind_host=args.bind_host,
        bind_port=args.bind_port,
        poll_interval=args.interval,
        request_timeout=args.timeout,
        log_level=args.log_level,
        log_file=args.log_file,
    )
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))
    return config


def main(argv: Optional[List[str]] = None) -> None:
    config = parse_config(argv)
    setup_logging("jaildash", level=config.log_level, log_file=config.log_file)

    logger.info(f"Management API: {config.api_url_base}")
    logger.info(f"Bind Address: {config.bind_host}:{config.bind_port}")

    client = JailApiClient(
        config.api_url_base,
        config.user,
        config.password,
        timeout=config.request_timeout,
    )
    snapshot = Snapshot()
    poller = JailPoller(client, snapshot, interval=config.poll_interval)
    app = create_app(snapshot)

    poller.start()
    try:
        app.run(host=config.bind_host, port=config.bind_port, threaded=True, use_reloader=False)
    finally:
        poller.stop()
        client.close()


if __name__ == "__main__":
    main()
