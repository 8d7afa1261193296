"""
Entry point for the Student Records API
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from config import HOST, PORT, LOG_LEVEL
from database import create_database
from errors import setup_error_handling
from routers import student

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_database()
    logger.info("Database tables ready")
    yield


app = FastAPI(
    title="Student Records API",
    description="Create, update and delete student records",
    version="1.0.0",
    lifespan=lifespan
)

setup_error_handling(app)

app.include_router(student.router, prefix="/api/students", tags=["Students"])


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    logger.info("Starting Student Records API on port %s", PORT)
    uvicorn.run(app, host=HOST, port=PORT)
