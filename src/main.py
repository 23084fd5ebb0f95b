from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.banks import router as banks_router
from src.adapters.api.controllers.stats import router as stats_router
from src.adapters.settings import AppConfig

logging.basicConfig(
    level=AppConfig.from_env().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="BankLocator")
app.include_router(banks_router)
app.include_router(stats_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Keep 500 responses JSON shaped like every other error."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    if AppConfig.from_env().reveal_errors or isinstance(exc, ValueError):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
