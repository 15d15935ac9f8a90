"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("FLOW_COUNCIL_DB_PATH", "flow_council.duckdb")

# Logging
LOG_DIR = Path(os.getenv("FLOW_COUNCIL_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("FLOW_COUNCIL_LOG_LEVEL", "INFO").upper()

# RPC
RPC_URL = os.getenv("FLOW_COUNCIL_RPC_URL", "http://localhost:8545")
RPC_TIMEOUT = 60
MAX_CONCURRENT = 20

# Indexing
FACTORY_ADDRESSES = [a.strip().lower() for a in os.getenv("FLOW_COUNCIL_FACTORIES", "").split(",") if a.strip()]
STRICT_MODE = os.getenv("FLOW_COUNCIL_STRICT", "0").lower() in ("1", "true", "yes")
