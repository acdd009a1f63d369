from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from splitledger.api.v1.routes.expense import router as expense_router
from splitledger.api.v1.routes.system import router as system_router
from splitledger.api.v1.routes.user import router as user_router
from splitledger.core.config import settings
from splitledger.core.db_check import wait_for_db
from splitledger.core.exceptions import LedgerError
from splitledger.core.logging_config import configure_logging
import splitledger.db.base  # noqa: F401

configure_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    await wait_for_db()
    yield

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "error": exc.kind, "details": exc.details},
    )

@app.get("/")
async def root():
    return {"message": "Splitledger Backend is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(user_router, prefix="/api/v1/users")
app.include_router(expense_router, prefix="/api/v1/expenses")
