from fastapi import APIRouter, Depends
from app.services.system_services import check_upstream_service, system_health
from app.services.expenses_client import ExpensesClient
from app.core.dependencies import get_expenses_client

router = APIRouter()

@router.get("/health/upstream")
async def check_upstream(client: ExpensesClient = Depends(get_expenses_client)):
    return await check_upstream_service(client)

@router.get("/health")
async def health():
    return await system_health()
