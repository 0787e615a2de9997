import os
from pathlib import Path

DATA_DIR = os.getenv("DATA_DIR", str(Path(__file__).resolve().parent / "data"))
API_PREFIX = os.getenv("API_PREFIX", "/api/v1")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
