import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
from pymongo.errors import PyMongoError
from config.logger import setup_logging
from config import dataBase
from routes import todo_routes

# Load environment
load_dotenv()
setup_logging()
logger = logging.getLogger(__name__)

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


# --------------------------
# FastAPI setup
# --------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        await run_in_threadpool(dataBase.ping)
    except PyMongoError as e:
        # keep serving; requests will surface the driver error until the server is back
        logger.error("Failed to connect to MongoDB at %s: %s", dataBase.MONGO_URI, e)
    yield


app = FastAPI(title="Todos API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(todo_routes.todo_router, prefix="/api", tags=["Todos"])


@app.exception_handler(PyMongoError)
async def handle_database_error(request: Request, exc: PyMongoError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Database error"})


@app.get("/api/health")
def health():
    """Liveness check; does not touch the database."""
    return {"status": "ok", "service": "todos"}


# --------------------------
# Run server
# --------------------------

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
