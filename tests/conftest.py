from datetime import datetime, timezone

import pytest

import periodkit.modules.period.service as period_service
import periodkit.modules.period.utils as period_utils
import periodkit.modules.relative_time.service as relative_time_service


@pytest.fixture
def freeze_now(monkeypatch):
    """Pin utc_now() to a fixed UTC instant for every module that reads it."""

    def _freeze(*args) -> datetime:
        frozen = datetime(*args, tzinfo=timezone.utc)
        for module in (period_service, period_utils, relative_time_service):
            monkeypatch.setattr(module, "utc_now", lambda: frozen)
        return frozen

    return _freeze
