import time
from datetime import datetime

import uvicorn
from fastapi import FastAPI, Request

from .api.v1 import api_router
from .api.v1.health import router as health_router
from .config import get_app_config
from .logging_config import log_api_access

app = FastAPI(title="Region Health Server", version="1.0.0")
app.include_router(health_router, tags=["health"])
app.include_router(api_router, prefix="/api/v1")

_app_config = get_app_config()


@app.on_event("startup")
async def startup_event():
    _app_config.logger.info(f"Server started at {datetime.now().isoformat()} (region={_app_config.region})")

@app.on_event("shutdown")
async def shutdown_event():
    _app_config.logger.info(f"Server stopped at {datetime.now().isoformat()}")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    client = request.client.host if request.client else None

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        log_api_access(request.method, request.url.path, response.status_code, process_time, client)
        return response
    except Exception as e:
        process_time = time.time() - start_time
        log_api_access(request.method, request.url.path, 500, process_time, client, error=str(e))
        _app_config.logger.error(f"{request.method} {request.url.path} failed: {e} ({process_time:.3f}s)")
        raise


def run() -> None:
    uvicorn.run(app, host=_app_config.host, port=_app_config.port)


if __name__ == "__main__":
    run()
