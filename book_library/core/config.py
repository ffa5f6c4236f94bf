import os

DATABASE_URL = os.getenv("LIBRARY_DB", "sqlite:///./library.db")
LOG_LEVEL = os.getenv("LIBRARY_LOG", "INFO")
PROJECT_TITLE = os.getenv("LIBRARY_TITLE", "Book Library API")
HOST = os.getenv("LIBRARY_HOST", "127.0.0.1")
PORT = int(os.getenv("LIBRARY_PORT", "8000"))
SQL_ECHO = os.getenv("LIBRARY_SQL_ECHO", "false").lower() in {"1", "true", "yes"}
