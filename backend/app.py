# backend/app.py

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# --- Routers ---
from catalog_router import router as catalog_router

# --- DB & Models ---
from db import SessionLocal, engine
from init_db import init_tables, seed_enumerations
from models import HealthResponse

# 配置日志
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")

SEED_ON_STARTUP = os.getenv("CATALOG_SEED_ON_STARTUP", "1").lower() in {"1", "true", "yes", "y"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    if SEED_ON_STARTUP:
        init_tables(engine)
        db = SessionLocal()
        try:
            seed_enumerations(db)
        finally:
            db.close()
    else:
        logger.info("Skipping enumeration seeding (CATALOG_SEED_ON_STARTUP is off).")
    yield


app = FastAPI(title="MTB Trail Wiki Catalog", lifespan=lifespan)

# 挂载核心路由
app.include_router(catalog_router)

# CORS (允许前端跨域)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
def health():
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error(f"Health check database error: {e}")
        database = "unavailable"
    finally:
        db.close()
    return HealthResponse(status="ok", database=database)
