"""Shared test fixtures."""

import pytest

from bip21 import Address, override_config

from .mocks import ANDREAS, SEGWIT_ADDRESS


@pytest.fixture(autouse=True)
def restore_config():
    """Undo any configure() call made by a test."""
    with override_config():
        yield


@pytest.fixture
def andreas() -> Address:
    return Address.parse(ANDREAS)


@pytest.fixture
def segwit() -> Address:
    return Address.parse(SEGWIT_ADDRESS)
