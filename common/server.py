import argparse
from collections.abc import Sequence

import uvicorn


def parse_listen_address(value: str) -> tuple[str, int]:
    """Split a ``host:port`` address; an empty host binds every interface."""
    host, sep, port = value.rpartition(':')
    if not sep or not port.isdigit():
        raise ValueError(f'Invalid listen address {value!r}, expected [host]:port')
    port_number = int(port)
    if not 0 < port_number < 65536:
        raise ValueError(f'Port out of range in listen address {value!r}')
    host = host.strip('[]')
    return host or '0.0.0.0', port_number


def _listen_address(value: str) -> tuple[str, int]:
    try:
        return parse_listen_address(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def parse_args(
    description: str, default_address: str, argv: Sequence[str] | None = None
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        '--listen-address',
        type=_listen_address,
        default=default_address,
        help='Prometheus exporter will use this address (default: %(default)s)',
        metavar='[HOST]:PORT',
    )
    return parser.parse_args(argv)


def serve(app_path: str, listen_address: tuple[str, int]) -> None:
    host, port = listen_address
    uvicorn.run(app_path, host=host, port=port, log_config=None)
