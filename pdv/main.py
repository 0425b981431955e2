from __future__ import annotations

from fastapi import FastAPI

from pdv.api.routes_health import router as health_router
from pdv.api.routes_whatsapp import router as whatsapp_router
from pdv.logging_config import init_logging
from pdv.settings import settings

app = FastAPI(title=settings.app_name)
app.include_router(health_router)
app.include_router(whatsapp_router)


@app.on_event("startup")
def startup() -> None:
    init_logging(settings.log_level)
