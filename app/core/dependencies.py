from fastapi import Depends, Request

from app.core.exceptions import ExpensesApiError
from app.core.session import BearerSessionProvider, SessionContext
from app.services.expenses_client import ExpensesClient
from app.services.snapshot_store import SnapshotStore

session_provider = BearerSessionProvider()


def get_session(request: Request) -> SessionContext:
    return session_provider(request)


def get_expenses_client(request: Request) -> ExpensesClient:
    return request.app.state.expenses_client


def get_snapshot_store(request: Request) -> SnapshotStore:
    return request.app.state.snapshot_store


async def load_snapshot(
    group_id: str,
    session: SessionContext = Depends(get_session),
    store: SnapshotStore = Depends(get_snapshot_store),
):
    # every request works on a freshly fetched snapshot
    try:
        return await store.refresh(group_id, session.token)
    except ExpensesApiError as e:
        raise e.to_http()
