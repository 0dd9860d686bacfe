import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from xiaoliuren.api.routes import router
from xiaoliuren.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level.upper())
    yield

app = FastAPI(title="Xiao Liu Ren", lifespan=lifespan)
app.include_router(router)


@app.get("/")
def home():
    return {"ok": True, "app": "Xiao Liu Ren"}
