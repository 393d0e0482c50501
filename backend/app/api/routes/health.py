from fastapi import APIRouter

from app.db.connection import db_pool

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "database": db_pool.test_connection(),
        "rate_source": "database" if db_pool.is_configured else "builtin",
    }
