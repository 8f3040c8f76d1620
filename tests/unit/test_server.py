"""Tests for listen address handling and the command line."""

import pytest

from common.server import parse_args, parse_listen_address


@pytest.mark.parametrize(
    ('address', 'expected'),
    [
        (':9679', ('0.0.0.0', 9679)),
        ('127.0.0.1:9677', ('127.0.0.1', 9677)),
        ('localhost:8000', ('localhost', 8000)),
        ('[::1]:9100', ('::1', 9100)),
    ],
)
def test_parse_listen_address(address, expected) -> None:
    assert parse_listen_address(address) == expected


@pytest.mark.parametrize('address', ['9679', 'host:', 'host:http', ':0', ':70000'])
def test_parse_listen_address_rejects_invalid(address) -> None:
    with pytest.raises(ValueError):
        parse_listen_address(address)


def test_default_listen_address_is_used_without_flag() -> None:
    args = parse_args('exporter', ':9679', [])

    assert args.listen_address == ('0.0.0.0', 9679)


def test_listen_address_flag_overrides_default() -> None:
    args = parse_args('exporter', ':9679', ['--listen-address', '127.0.0.1:9000'])

    assert args.listen_address == ('127.0.0.1', 9000)


def test_invalid_flag_is_a_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        parse_args('exporter', ':9679', ['--listen-address', 'nope'])

    assert exc_info.value.code == 2
    assert 'Invalid listen address' in capsys.readouterr().err
