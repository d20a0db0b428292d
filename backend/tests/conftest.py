"""Root conftest: shared test configuration."""

import os

# Never touch a real clients.db from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("LOG_FORMAT", "text")
