from fastapi import FastAPI
from contextlib import asynccontextmanager
import infra.database.connection as db_connection
from app.services.library_app_service import LibraryAppService
from api.routers import library, system

# The scan runs to completion before any request is served;
# a crawl or catalog error aborts startup.
@asynccontextmanager
async def lifespan(app: FastAPI):
    db_connection.init_db()
    app.state.library = LibraryAppService().startup()
    yield
    db_connection.close_db()

app = FastAPI(title="Musicat API", lifespan=lifespan)

app.include_router(library.router)
app.include_router(system.router)
