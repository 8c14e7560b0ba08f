from contextlib import asynccontextmanager

from fastapi import FastAPI
from app.api.v1.routes.system import router as system_router
from app.api.v1.routes.balance import router as balance_router
from app.api.v1.routes.settlement import router as settlement_router
from app.api.v1.routes.payment import router as payment_router
from app.core.config import get_settings
from app.core.log_config import configure_logging
from app.services.expenses_client import ExpensesClient
from app.services.snapshot_store import SnapshotStore, log_snapshot


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger = configure_logging(settings.LOG_LEVEL)

    client = ExpensesClient(settings.EXPENSES_API_URL, timeout=settings.HTTP_TIMEOUT)
    app.state.expenses_client = client
    store = SnapshotStore(client, max_groups=settings.SNAPSHOT_CACHE_SIZE)
    store.subscribe(log_snapshot)
    app.state.snapshot_store = store
    logger.info("Splito : using expenses API at %s", settings.EXPENSES_API_URL)

    yield

    await client.aclose()


app = FastAPI(title="Splito Settle", lifespan=lifespan)

@app.get("/")
async def root():
    return {"message": "Splito Settle is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(balance_router, prefix="/api/v1/groups")
app.include_router(settlement_router, prefix="/api/v1/groups")
app.include_router(payment_router, prefix="/api/v1/groups")
