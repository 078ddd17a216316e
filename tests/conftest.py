import pytest

from apitest.verifier import new_default_verifier
from utils import MockT

pytest_plugins = ("pytest_httpserver",)


@pytest.fixture(name='mock_t')
def fixture_mock_t():
    return MockT()


@pytest.fixture(name='verifier')
def fixture_verifier():
    return new_default_verifier()
