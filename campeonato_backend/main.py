import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlmodel import Session, select

from campeonato_backend.core.config import AUTO_SEED, LOG_LEVEL
from campeonato_backend.core.database import engine, init_db
from campeonato_backend.models.championship_model import Championship
from campeonato_backend.seed.seed_demo import seed_demo

# --- Routers ---
from campeonato_backend.routes.championship_routes import router as championship_router
from campeonato_backend.routes.team_routes import router as team_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def prepare_database(bind=None, auto_seed: bool = AUTO_SEED):
    # 1️⃣ Init DB tables
    init_db(bind)

    # 2️⃣ Auto-seed an empty database
    if not auto_seed:
        return

    with Session(bind or engine) as session:
        if session.exec(select(Championship)).first() is None:
            logger.info("🌱 No championships found. Auto-seeding database...")
            seed_demo(session)
        else:
            logger.info("✅ Database already seeded. Skipping auto-seed.")


@asynccontextmanager
async def lifespan(app: FastAPI):
    prepare_database()
    yield


app = FastAPI(title="Campeonato API", lifespan=lifespan)


@app.get("/")
def root():
    return {"status": "ok"}


# Routers
app.include_router(championship_router, prefix="/championships", tags=["Championships"])
app.include_router(team_router, prefix="/teams", tags=["Teams"])
