import os

import pytest

os.environ.setdefault("OTEL_SDK_DISABLED", "true")

from admin_only_pii.policy.core import Caller, PiiGuard


@pytest.fixture
def guard():
    return PiiGuard()


@pytest.fixture
def admin():
    return Caller(id=1, username="alice", admin=True)


@pytest.fixture
def moderator():
    return Caller(id=2, username="mo", moderator=True)


@pytest.fixture
def member():
    return Caller(id=3, username="bob")
