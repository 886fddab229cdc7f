import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.requests import Request
from starlette.responses import JSONResponse

from taikowallet.api.actions import router as actions_router
from taikowallet.config import settings
from taikowallet.container import Container
from taikowallet.exceptions import ConfigurationError

logger = logging.getLogger("taikowallet.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    container = Container()
    app.state.container = container
    yield
    await container.http_client().close()


app = FastAPI(title="taikowallet", version="0.1.0", lifespan=lifespan)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("Configuration error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    logger.error("Unhandled error on %s %s:\n%s", request.method, request.url.path, "".join(tb))
    return JSONResponse(status_code=500, content={"detail": str(exc)})


app.include_router(actions_router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}
