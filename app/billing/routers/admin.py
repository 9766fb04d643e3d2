"""
Operator page.
"""
import logging
import os

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from app.billing.dependencies import get_settings
from app.config import Settings

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/admin", include_in_schema=False)
def admin_page(settings: Settings = Depends(get_settings)):
    path = os.path.join(settings.PUBLIC_DIR, "admin.html")
    if not os.path.isfile(path):
        logger.warning("Admin page missing: %s", path)
        raise HTTPException(status_code=404, detail="Admin page not found")
    return FileResponse(path, media_type="text/html")
