import os

# settings are read at import time, so pin the test environment first
os.environ.setdefault("RECORD_PROVIDER", "memory")
os.environ.setdefault("SIMULATED_LATENCY_MIN_MS", "0")
os.environ.setdefault("SIMULATED_LATENCY_MAX_MS", "0")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")
