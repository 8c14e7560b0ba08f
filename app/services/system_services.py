from app.services.expenses_client import ExpensesClient

async def check_upstream_service(client: ExpensesClient):
    if await client.check_health():
        return {"upstream": True, "message": "Expenses API is reachable"}
    return {"upstream": False, "message": "Expenses API is unreachable"}

async def system_health():
    return {
        "status": "ok"
    }
