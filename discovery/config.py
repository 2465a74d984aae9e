import os

DB_USER = os.getenv("DB_USER", "massagehub")
DB_PASS = os.getenv("DB_PASS", "massagehub")
DB_NAME = os.getenv("DB_NAME", "massagehub")
DB_HOST = os.getenv("DB_HOST", "postgres")
DB_PORT = os.getenv("DB_PORT", "5432")

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql+psycopg2://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)

# Initial distance ceiling of a fresh filter bar
DEFAULT_MAX_DISTANCE_KM = float(os.getenv("DEFAULT_MAX_DISTANCE_KM", "50"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
