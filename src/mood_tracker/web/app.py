"""FastAPI application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..exceptions import EntryValidationError
from .routes import entries, medications, reminders, trends

app = FastAPI(
    title="Mood Tracker",
    description="Mood, sleep and medication log with daily trend aggregation",
    version="0.1.0",
)

app.include_router(entries.router, prefix="/entries", tags=["entries"])
app.include_router(trends.router, tags=["trends"])
app.include_router(medications.router, prefix="/medications", tags=["medications"])
app.include_router(reminders.router, prefix="/reminders", tags=["reminders"])


@app.exception_handler(EntryValidationError)
async def validation_error_handler(request: Request, exc: EntryValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "reason": exc.reason.value},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}
