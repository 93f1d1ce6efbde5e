import pytest

from notekeeper.core.services.health_service import HealthService


class FakeScalarResult:
    def __init__(self, scalar_value):
        self._scalar_value = scalar_value

    def scalar(self):
        return self._scalar_value


class FakeSession:
    def __init__(self, ok=True):
        self.ok = ok
        self.executed = []

    async def execute(self, stmt):
        self.executed.append(stmt)
        if self.ok:
            return FakeScalarResult(1)
        raise RuntimeError("db down")


@pytest.mark.asyncio
async def test_check_database_health_ok():
    session = FakeSession(ok=True)
    res = await HealthService(session).check_database_health()
    assert res["connected"] is True
    assert res["status"] == "healthy"
    assert res["response_time_ms"] >= 0
    assert len(session.executed) == 1


@pytest.mark.asyncio
async def test_check_database_health_down():
    res = await HealthService(FakeSession(ok=False)).check_database_health()
    assert res["connected"] is False
    assert res["status"] == "unhealthy"
    assert res["error"] == "RuntimeError"


@pytest.mark.asyncio
async def test_check_database_health_real_session(test_session):
    res = await HealthService(test_session).check_database_health()
    assert res["connected"] is True
