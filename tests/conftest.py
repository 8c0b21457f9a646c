import pytest

from rusty_server.server import create_server
from rusty_server.tools import RequestCounter


@pytest.fixture
def counter():
    return RequestCounter()


@pytest.fixture
def server():
    return create_server()
