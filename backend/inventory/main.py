import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from inventory.api.auth import router as auth_router
from inventory.api.deps import get_token_service
from inventory.api.exception_handlers import setup_exception_handlers
from inventory.api.products import router as products_router
from inventory.api.users import router as users_router
from inventory.config import settings
from inventory.database import engine, init_db
from inventory.services.accounts import AccountService

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from sqlmodel import Session

    configure_logging()
    init_db()
    if settings.admin_email and settings.admin_password:
        with Session(engine) as session:
            AccountService(session, get_token_service()).ensure_admin(
                settings.admin_email, settings.admin_password
            )
    logger.info("Inventory API started")
    yield


app = FastAPI(title="Inventory API", version="0.1.0", lifespan=lifespan)

setup_exception_handlers(app)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(products_router)


@app.get("/")
async def index():
    return {"message": "Welcome to the Product API!"}


@app.get("/health")
async def health():
    return {"status": "ok"}
