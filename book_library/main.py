import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI

from book_library.api import routes
from book_library.api.errors import register_exception_handlers
from book_library.core import config
from book_library.core.database import Base, engine
from book_library.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Creating database tables (if not present)...")
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    setup_logging(config.LOG_LEVEL)
    app = FastAPI(title=config.PROJECT_TITLE, lifespan=lifespan)
    register_exception_handlers(app)
    app.include_router(routes.router)

    @app.get("/health")
    def health():
        return {"status": "ok", "time": datetime.now().isoformat()}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
