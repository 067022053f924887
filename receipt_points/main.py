import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from .routes.receipts import router as receipts_router
from .config import settings
from .utils.logging import configure_logging, logger

app = FastAPI(title=settings.APP_NAME,
              description="Scores purchase receipts and serves the points by receipt id",
    version="0.1.0",
    docs_url="/docs",          # Swagger UI
    redoc_url="/redoc",        # ReDoc
    openapi_url="/openapi.json")

app.include_router(receipts_router)

@app.exception_handler(RequestValidationError)
async def bad_request(request: Request, exc: RequestValidationError):
    # invalid JSON and schema mismatches are both client errors here
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = first.get("msg", "Invalid request body")
    detail = f"{loc}: {msg}" if loc else msg
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=400, content={"detail": detail})

@app.get("/health")
def health():
    return {"ok": True}

def run():
    configure_logging(settings.LOG_LEVEL)
    logger.info("Server starting on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
