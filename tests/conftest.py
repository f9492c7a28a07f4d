"""Test configuration and fixtures."""

import os

import logfire
import pytest

# Settings are read from the environment by the DI container
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "inkwell-test-signing-key-0123456789abcdef")
# Cheap argon2 parameters keep hashing fast in tests
os.environ.setdefault("AUTH__ARGON2_TIME_COST", "1")
os.environ.setdefault("AUTH__ARGON2_MEMORY_COST", "1024")
os.environ.setdefault("AUTH__ARGON2_PARALLELISM", "1")

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def uploads_root(tmp_path, monkeypatch):
    """Point the uploads directory at a per-test temp dir."""
    root = tmp_path / "uploads"
    monkeypatch.setenv("UPLOADS__ROOT", str(root))
    return root
