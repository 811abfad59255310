"""Shared pytest fixtures for awg_interface tests."""

from unittest.mock import Mock

import pytest

from awg_interface.config import InterfaceBuilder
from awg_interface.crypto import KeyPair
from awg_interface.viewmodel import InterfaceProxy


@pytest.fixture
def key_pair():
    """Freshly generated key pair.

    Returns:
        KeyPair: New key pair
    """
    return KeyPair()


@pytest.fixture
def private_key_b64(key_pair):
    """Base64 private key of the ``key_pair`` fixture."""
    return key_pair.private_key.to_base64()


@pytest.fixture
def full_interface(key_pair):
    """Interface with every optional field populated.

    Returns:
        Interface: Validated interface
    """
    return (
        InterfaceBuilder()
        .parse_addresses("10.0.0.2/32, fd00::2/128")
        .parse_dns_servers("1.1.1.1, 2606:4700:4700::1111, corp.example.com")
        .exclude_applications(["com.example.bank", "com.example.maps"])
        .parse_listen_port("51820")
        .parse_mtu("1420")
        .set_key_pair(key_pair)
        .parse_jc("4")
        .parse_jmin("40")
        .parse_jmax("70")
        .parse_s1("15")
        .parse_s2("18")
        .parse_h1("1")
        .parse_h2("2")
        .parse_h3("3")
        .parse_h4("4")
        .build()
    )


@pytest.fixture
def proxy():
    """Empty staging proxy."""
    return InterfaceProxy()


@pytest.fixture
def observer():
    """Mock observer callback recording ``(sender, name)`` calls."""
    return Mock()


@pytest.fixture
def mock_logger(monkeypatch):
    """Mock the builder logger to capture log calls.

    Returns:
        Mock: Mocked logger
    """
    mock_log = Mock()
    monkeypatch.setattr("awg_interface.config.builder.logger", mock_log)
    return mock_log
