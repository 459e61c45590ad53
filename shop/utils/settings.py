# shop/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = int(os.getenv("DB_PORT", 5433))
DB_USERNAME = os.getenv("DB_USERNAME", "postgres")
DB_PASSWORD = os.getenv("DB_PASSWORD", "postgres")
DB_NAME = os.getenv("DB_NAME", "my_crm")

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql+psycopg2://{DB_USERNAME}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)

APP_ENV = os.getenv("APP_ENV", "production")
SQL_ECHO = APP_ENV == "development"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# create_all on startup, migrations are the alternative
DB_CREATE_ALL = os.getenv("DB_CREATE_ALL", "1").lower() in ("1", "true", "yes")

SEED_USERS = int(os.getenv("SEED_USERS", 1000))
SEED_ORDERS_PER_USER = int(os.getenv("SEED_ORDERS_PER_USER", 10))
SEED_ITEMS_PER_ORDER = int(os.getenv("SEED_ITEMS_PER_ORDER", 3))
