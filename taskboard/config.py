import os

# Persistence backend: "json" (default), "sql" or "memory"
STORE_BACKEND = os.environ.get("TASKBOARD_STORE", "json")
DATA_FILE = os.environ.get("TASKBOARD_DATA_FILE", "./data.json")

# Only used by the "sql" backend; SQLite file for local single-instance runs
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./taskboard.db")

# Hold a lock around every load-mutate-save; set to 0 to get last-writer-wins
SERIALIZE_WRITES = os.environ.get("TASKBOARD_SERIALIZE_WRITES", "1").strip().lower() in {"1", "true", "yes", "on"}

BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", 10))

SMTP_HOST = os.environ.get("SMTP_HOST")
SMTP_PORT = os.environ.get("SMTP_PORT")
SMTP_USER = os.environ.get("SMTP_USER")
SMTP_PASS = os.environ.get("SMTP_PASS")
SMTP_FROM = os.environ.get("SMTP_FROM")

CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 3000))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
