import os

# =====================================
# Global configuration for Campeonato
# =====================================

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# DATABASE_URL:
# Any SQLAlchemy URL. Defaults to a SQLite file beside the package.
DATABASE_URL = os.getenv(
    "CAMPEONATO_DATABASE_URL",
    f"sqlite:///{os.path.join(BASE_DIR, 'campeonato.db')}",
)

# SQL_ECHO:
# When True, SQLAlchemy prints every statement (noisy, debugging only).
SQL_ECHO = os.getenv("CAMPEONATO_SQL_ECHO", "false").lower() in ("1", "true", "yes")

# LOG_LEVEL:
# Root logging level applied by main.py.
LOG_LEVEL = os.getenv("CAMPEONATO_LOG_LEVEL", "INFO").upper()

# AUTO_SEED:
# When True, an empty database is filled with the demo championship on startup.
AUTO_SEED = os.getenv("CAMPEONATO_AUTO_SEED", "true").lower() in ("1", "true", "yes")
