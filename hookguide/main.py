# hookguide/main.py
from fastapi import FastAPI

from . import __version__
from .catalog import catalog_router
from .catalog.store import list_hooks
from .config import get_logger, settings, setup_logging

setup_logging()
logger = get_logger(__name__)

app = FastAPI(
    title=settings.app_title,
    description=(
        "Read-only API over the hook catalog: every hook descriptor, "
        "lookups by category and id, and the sidebar and landing page "
        "groupings built from them."
    ),
    version=__version__,
)

app.include_router(catalog_router)


# Base route for a quick health check
@app.get("/")
def health_check():
    return {"status": "ok", "hooks": len(list_hooks())}


logger.info("Catalog API ready with %d hooks", len(list_hooks()))
