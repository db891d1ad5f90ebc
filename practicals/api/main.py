import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from practicals.adapters.sqlite.migrator import SQLiteMigrator
from practicals.adapters.sqlite.repos import SQLiteAccountRepo
from practicals.api.deps import ApiError, get_settings
from practicals.app_shell.config import validate_ops_rules
from practicals.rules.loader import load_rules
from practicals.shell.http.health import (
    DatabaseCheck,
    StartupCheck,
    StartupTracker,
    create_health_router,
    get_health_registry,
)

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = app.dependency_overrides.get(get_settings, get_settings)()

    # Load rules and validate on startup (fail-fast)
    rules = load_rules(settings.rules_path)
    validate_ops_rules(rules, settings.data_dir)
    logger.info("Rules loaded from %s", settings.rules_path)

    applied = SQLiteMigrator(settings.db_path).run_migrations()
    if applied:
        logger.info("Applied migrations: %s", ", ".join(applied))

    for directory in (settings.logs_dir, settings.uploads_dir):
        directory.mkdir(parents=True, exist_ok=True)

    registry = get_health_registry()
    registry.register(StartupCheck())
    registry.register(DatabaseCheck(SQLiteAccountRepo(settings.db_path).ping))
    StartupTracker.mark_started()

    yield

    StartupTracker.reset()


app = FastAPI(
    title="Full-Stack Practicals API",
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.content)


# --- Routers ---
from practicals.api.routes import (  # noqa: E402
    accounts,
    chat,
    clock,
    contact,
    keypad,
    kids_calculator,
    library,
    logs,
    navigation,
    reps,
    resumes,
    site,
    students,
    tax,
    todos,
    weather,
)

app.include_router(logs.router, prefix="", tags=["Log Viewer"])
app.include_router(kids_calculator.router, prefix="/kids", tags=["Kids Calculator"])
app.include_router(tax.router, prefix="/tax", tags=["Tax Form"])
app.include_router(resumes.router, prefix="/resumes", tags=["Resumes"])
app.include_router(library.router, prefix="/api/library", tags=["Library"])
app.include_router(contact.router, prefix="/api/contact", tags=["Contact"])
app.include_router(students.router, prefix="/api/students", tags=["Students"])
app.include_router(weather.router, prefix="/api/weather", tags=["Weather"])
app.include_router(clock.router, prefix="/api/clock", tags=["Clock"])
app.include_router(keypad.router, prefix="/api/keypad", tags=["Keypad"])
app.include_router(todos.router, prefix="/api/todos", tags=["Todos"])
app.include_router(navigation.router, prefix="/api/navigation", tags=["Navigation"])
app.include_router(reps.router, prefix="/api/reps", tags=["Reps"])
app.include_router(site.router, prefix="/api/site", tags=["Site"])
app.include_router(accounts.router, prefix="/api/auth", tags=["Auth"])
app.include_router(chat.router, prefix="/api/chat", tags=["Chat"])
app.include_router(create_health_router(version=VERSION))


# CORS (browser clients of the individual practicals)
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
