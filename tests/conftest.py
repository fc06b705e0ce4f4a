import pytest
import structlog

from hashkit.password import ParameterSet, get_default_hasher


# Small costs keep Argon2 fast in tests; salt stays >= 8 bytes as Argon2 requires.
FAST_PARAMS = ParameterSet(
    memory_kib=64,
    iterations=1,
    parallelism=1,
    salt_length=16,
    key_length=32,
)


@pytest.fixture
def fast_params():
    return FAST_PARAMS


@pytest.fixture(autouse=True)
def fast_default_hasher(monkeypatch):
    """Point the cached default hasher at cheap parameters."""
    monkeypatch.setenv("HASHKIT_MEMORY_KIB", str(FAST_PARAMS.memory_kib))
    monkeypatch.setenv("HASHKIT_ITERATIONS", str(FAST_PARAMS.iterations))
    monkeypatch.setenv("HASHKIT_PARALLELISM", str(FAST_PARAMS.parallelism))
    get_default_hasher.cache_clear()
    yield
    get_default_hasher.cache_clear()
    structlog.reset_defaults()
