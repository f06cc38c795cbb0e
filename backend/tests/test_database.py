import pytest

from shared.config import Settings
from shared.exceptions import StartupError
from shared.infrastructure import database


async def test_connect_unreachable_raises_startup_error(monkeypatch):
    closed = []
    create_client = database.create_client

    def tracking_client(settings):
        client = create_client(settings)
        close = client.close

        async def tracked_close():
            closed.append(True)
            await close()

        client.close = tracked_close
        return client

    monkeypatch.setattr(database, "create_client", tracking_client)
    settings = Settings(
        _env_file=None, MONGO_URI="mongodb://127.0.0.1:1", MONGO_TIMEOUT_MS=100
    )

    with pytest.raises(StartupError, match="Could not connect to the database"):
        await database.connect(settings)
    assert closed == [True]
