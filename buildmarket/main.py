from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from buildmarket.core import bootstrap, settings
from buildmarket.core.db import Database
from buildmarket.storage import Storage


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One DB handle per process, opened here and closed on shutdown.
    database = Database()
    await database.connect()
    try:
        if settings.apply_schema_on_startup():
            await bootstrap.apply_schema(database)
        if settings.seed_on_startup():
            await bootstrap.seed_if_empty(database)
        app.state.storage = Storage(database)
        yield
    finally:
        await database.close()


app = FastAPI(lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_storage(request: Request) -> Storage:
    """
    FastAPI dependency for route handlers: `storage: Storage = Depends(get_storage)`.
    """
    return request.app.state.storage


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
