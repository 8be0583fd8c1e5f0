"""Configures pytest further."""
import pytest

from textrsa import keygen

# Mersenne primes backing the fixed test key pair.
M521 = 2**521 - 1
M607 = 2**607 - 1


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extreme value extremely slow tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture(scope="session")
def known_primes() -> tuple[int, int]:
    return M521, M607


@pytest.fixture(scope="session")
def key_pair(known_primes) -> keygen.KeyPair:
    """A key pair built from known primes, with the builtin pow as the inverse oracle."""
    p, q = known_primes
    e = keygen.PUBLIC_EXPONENT
    return keygen.KeyPair(e, pow(e, -1, (p - 1) * (q - 1)), p * q)
