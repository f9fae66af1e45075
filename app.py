import logging
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from api.routes import router as api_router
from bots.base_bot import CompletionBot
from config.settings import STATIC_DIR, CORS_ORIGINS, LOG_LEVEL, HOST, PORT
from managers.session_manager import SessionManager
from models.database import engine as default_engine, create_db_and_tables
from services.content_cache import ContentCache
from services.portfolio_api import PortfolioClient
from services.theme_store import ThemeStore, SQLPreferenceStorage

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


def create_app(client: PortfolioClient = None, bot: CompletionBot = None, engine=None) -> FastAPI:
    client = client or PortfolioClient()
    bot = bot or CompletionBot()
    engine = engine or default_engine

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        create_db_and_tables(engine)
        app.state.theme_store = ThemeStore(SQLPreferenceStorage(engine)).load()
        app.state.content_cache = ContentCache(client)
        app.state.sessions = SessionManager(client, bot, snapshot_provider=app.state.content_cache.snapshot)
        if not bot.is_configured:
            logger.warning("GROQ_API_KEY is not set in environment, chat replies will use the fallback message")
        logger.info("Portfolio service started")

        yield

        # Shutdown
        app.state.theme_store.close()
        client.close()
        logger.info("Portfolio service stopped")

    app = FastAPI(
        title="Portfolio",
        description="Backend for the portfolio site: section content, contact wizard, theme and AI chat assistant.",
        version="1.0.0",
        lifespan=lifespan
    )

    # Mount static files
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routes
    app.include_router(api_router)

    @app.get("/")
    async def root():
        return {"message": "Welcome to the portfolio API. The site shell is served from /static/index.html.", "status": "active"}

    @app.get("/index.html", include_in_schema=False)
    async def serve_frontend():
        return FileResponse(STATIC_DIR / "index.html")

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
