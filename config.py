import os
from dotenv import load_dotenv

load_dotenv()

# Database (sqlite:// is an in-memory database)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")

# Write routes are open when no key is configured
API_KEY = os.getenv("API_KEY")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
