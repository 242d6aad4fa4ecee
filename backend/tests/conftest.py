"""Root conftest: shared test configuration."""

import os

# Keep tests off any real database and skip boot-time side effects
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_DEMO_DATA", "false")
os.environ.setdefault("LOG_FORMAT", "text")
