import pytest
import redis


@pytest.fixture
def redis_client():
    r = redis.Redis(host="localhost", port=6379, db=15)  # db=15 for tests
    try:
        r.ping()
    except redis.ConnectionError:
        pytest.skip("Redis not available")
    yield r
    # cleanup after each test
    for key in r.scan_iter("testanagrammer:*"):
        r.delete(key)
