"""Shared fixtures for mojo-spy tests."""

from __future__ import annotations

import tempfile

import pytest

from mojo_spy import Spy


class Mailer:
    """A small collaborator whose ``send`` method gets spied on."""

    def __init__(self) -> None:
        self.sent: list[tuple] = []

    def send(self, *args, **kwargs):
        self.sent.append((self, args, kwargs))
        return "sent"

    @classmethod
    def create(cls, *args):
        return cls()

    @staticmethod
    def normalize(address):
        return address.lower()


@pytest.fixture
def mailer() -> Mailer:
    """Create a fresh Mailer instance."""
    return Mailer()


@pytest.fixture
def spy(mailer):
    """Spy on ``mailer.send`` and retire it after the test."""
    s = Spy(mailer, "send")
    yield s
    s.retire()


@pytest.fixture
def table() -> dict:
    """A plain mapping holding callables, like a dispatch table."""
    calls: list[tuple] = []

    def method(*args):
        calls.append(args)

    return {"method": method, "calls": calls}


@pytest.fixture
def temp_dir():
    """Create a temporary directory for config files."""
    d = tempfile.mkdtemp(prefix="mojo_spy_test_")
    yield d
    # Cleanup
    import shutil

    shutil.rmtree(d, ignore_errors=True)
