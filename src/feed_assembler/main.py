from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import load_settings
from .lib.fetcher import Fetcher
from .lib.http_client import create_http_client
from .routers import feed, health


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One client for the whole process; every request shares it.
    settings = load_settings()
    client = create_http_client(settings)
    app.state.fetcher = Fetcher(client)
    try:
        yield
    finally:
        await client.aclose()


app = FastAPI(
    title="Feed Assembler",
    description="Joins feed posts with their authors and comments",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(feed.router)


@app.get("/")
async def root():
    return {"message": "Feed Assembler"}
