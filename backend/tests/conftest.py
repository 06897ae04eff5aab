"""Root conftest — shared test configuration."""

import os

# Ensure tests never hit real providers or a real database
os.environ.setdefault("ANTHROPIC_API_KEY", "sk-ant-test-fake-key")
os.environ.setdefault("RECEIPT_ANALYZER", "mock")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
