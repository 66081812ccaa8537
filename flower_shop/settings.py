import os

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "sqlite+pysqlite:///./flower_shop.db",
)

DELIVERY_FEE = int(os.getenv("DELIVERY_FEE", 300))
SESSION_KEY = os.getenv("SESSION_KEY", "default")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DB_INIT_ATTEMPTS = int(os.getenv("DB_INIT_ATTEMPTS", 30))
