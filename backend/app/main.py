import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.db.connection import db_pool
from app.api.routes import health, rates, commuted, compensation

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: configure the rate database (built-in rates when unset)
    db_pool.initialize()
    yield
    db_pool.close()


app = FastAPI(title="SC Comp Calculators", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(rates.router, prefix="/api")
app.include_router(commuted.router, prefix="/api")
app.include_router(compensation.router, prefix="/api")
