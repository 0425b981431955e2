from __future__ import annotations

from fastapi import APIRouter

from pdv.settings import settings

router = APIRouter()


@router.get("/healthz")
def healthz():
    # loja e fuso usados nas mensagens e nos horários de retirada
    return {
        "status": "ok",
        "app": settings.app_name,
        "env": settings.env,
        "store": settings.store_name,
        "timezone": settings.timezone,
    }


@router.get("/")
def root():
    return {"status": "ok"}
