import argparse
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from cliphistory import __version__
from cliphistory.clipboard import BACKENDS

DEFAULT_LISTEN = ":3000"
ALL_INTERFACES = "0.0.0.0"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_listen(value: str) -> Tuple[str, int]:
    """Split a ``host:port`` listen address.

    An empty host (``:3000``) means all interfaces; IPv6 hosts are written in
    brackets (``[::1]:3000``).

    Raises:
        ValueError: If the address has no valid port.
    """
    host, sep, port_raw = value.strip().rpartition(":")
    if not sep:
        raise ValueError(f"Listen address {value!r} needs a port, e.g. ':3000'")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"IPv6 listen address {value!r} must be bracketed")

    try:
        port = int(port_raw)
    except ValueError:
        raise ValueError(f"Invalid port in listen address {value!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"Port {port} out of range in listen address {value!r}")

    return host or ALL_INTERFACES, port


@dataclass(frozen=True)
class ServerConfig:
    host: str = ALL_INTERFACES
    port: int = 3000
    clipboard: str = "auto"
    log_level: str = "INFO"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ServerConfig":
        host, port = parse_listen(args.listen)
        return cls(
            host=host,
            port=port,
            clipboard=args.clipboard,
            log_level=args.log_level.upper(),
        )


def _listen_arg(value: str) -> str:
    try:
        parse_listen(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cliphistory",
        description="cliphistory - serve the local clipboard history over HTTP"
    )

    parser.add_argument(
        "-l", "--listen",
        type=_listen_arg,
        default=os.getenv("CLIPHISTORY_LISTEN", DEFAULT_LISTEN),
        help=f"IP/Port to listen on (default: {DEFAULT_LISTEN})"
    )

    parser.add_argument(
        "-c", "--clipboard",
        choices=BACKENDS,
        default=os.getenv("CLIPHISTORY_CLIPBOARD", "auto"),
        help="Clipboard backend (default: auto)"
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv("CLIPHISTORY_LOG_LEVEL", "INFO"),
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"cliphistory {__version__}",
        help="Prints current version and exits"
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
