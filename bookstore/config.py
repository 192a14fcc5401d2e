import os

HOST = os.environ.get("BOOKSTORE_HOST", "0.0.0.0")
PORT = int(os.environ.get("BOOKSTORE_PORT", "8000"))
LOG_LEVEL = os.environ.get("BOOKSTORE_LOG_LEVEL", "INFO").upper()
