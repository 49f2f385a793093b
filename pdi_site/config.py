# pdi_site/config.py
from dotenv import load_dotenv; load_dotenv()
import os, logging
from typing import List, Optional

from pdi_site.services.lookups import WORKSPACES

# --- Sanity / image CDN ---
SANITY_PROJECT_ID = os.environ.get("SANITY_PROJECT_ID", "")
SANITY_DATASET = os.environ.get("SANITY_DATASET", "production")
SANITY_IMAGE_CDN = os.environ.get("SANITY_IMAGE_CDN", "https://cdn.sanity.io")

# workspace whose internal roles are shown on the site
HOME_WORKSPACE_ID = os.environ.get("HOME_WORKSPACE_ID", WORKSPACES["pourdavoud"]["id"])

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

def cors_origins() -> List[str]:
    raw = os.environ.get("CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()]

def webhook_secret() -> Optional[str]:
    # read per request so a rotated secret is picked up without a restart
    return os.environ.get("WEBHOOK_SECRET") or None

def configure_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
