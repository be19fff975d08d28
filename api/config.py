# api/config.py
import os

from dotenv import load_dotenv

load_dotenv()  # loads .env from project root

# Marketplace REST backend
BACKEND_URL         = os.getenv("BACKEND_URL", "http://localhost:4000/api").rstrip("/")
BACKEND_API_TOKEN   = os.getenv("BACKEND_API_TOKEN", "")
BACKEND_TIMEOUT     = float(os.getenv("BACKEND_TIMEOUT", "10"))
BACKEND_RETRIES     = int(os.getenv("BACKEND_RETRIES", "3"))       # total attempts
BACKEND_RETRY_DELAY = float(os.getenv("BACKEND_RETRY_DELAY", "0.5"))  # seconds

# Local snapshot store
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./influencer_snapshots.db")

# "backend" reads live records, "local" reads the snapshot store
INFLUENCER_SOURCE = os.getenv("INFLUENCER_SOURCE", "backend").lower()
if INFLUENCER_SOURCE not in ("backend", "local"):
    raise RuntimeError("INFLUENCER_SOURCE must be 'backend' or 'local'")

LOG_LEVEL    = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
