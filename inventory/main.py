import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory.api import products
from inventory.core.config import APP_NAME, CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from inventory.core.errors import InventoryError
from inventory.services.inventory_service import InventoryStore

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body."
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if loc:
        return f"Invalid request body: {loc}: {first.get('msg')}"
    return f"Invalid request body: {first.get('msg')}"


def create_app(store: Optional[InventoryStore] = None) -> FastAPI:
    """Build the API around `store`, or around a freshly seeded one."""
    app = FastAPI(title=APP_NAME)
    app.state.store = store if store is not None else InventoryStore()

    # --- CORS Middleware ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error Handlers ---
    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    app.include_router(products.router, tags=["products"])

    @app.get("/")
    def root():
        return {"status": "ok", "app": APP_NAME}

    return app


app = create_app()


def run():
    import uvicorn

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Server is running on http://{HOST}:{PORT}")
    logger.info("Data stored in memory (will reset on restart)")
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
