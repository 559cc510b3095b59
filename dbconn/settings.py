from __future__ import annotations

import os
from pathlib import Path


CONNECTIONS_PATH = Path(os.environ.get("CONNECTIONS_PATH", "config/dbConnections.json"))

CORS_ORIGINS = [
    o.strip()
    for o in os.environ.get("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if o.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
