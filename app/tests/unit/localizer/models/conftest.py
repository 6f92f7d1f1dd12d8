"""Fixtures for localizer.models tests."""

import pytest


@pytest.fixture
def make_error_payload():
    """Factory fixture for creating ErrorPayload instances."""

    def _make(message="Error", status=400, details=None):
        from localizer.models import ErrorPayload

        return ErrorPayload.of(message, status, details)

    return _make
