from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi import Request
import traceback

from sandwiched.app_exceptions.app_exception import AppException
from sandwiched.utils.loggers import error_logger
from sandwiched.extension import app

"""
    Routers
"""


from sandwiched.routers.health_check_router import router as health_check_router
from sandwiched.routers.sandwiches_router import router as sandwiches_router
from sandwiched.routers.transactions_router import router as transactions_router


app.include_router(health_check_router)
app.include_router(sandwiches_router)
app.include_router(transactions_router)


@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    return JSONResponse(
        status_code=400, content={"detail": jsonable_encoder(exc.errors())}
    )


@app.middleware("http")
async def error_logging_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as e:
        error_logger.error(
            f"Erro não tratado: {str(e)}\n"
            f"Método: {request.method}\n"
            f"URL: {request.url}\n"
            f"Headers: {dict(request.headers)}\n"
            f"Stack trace:\n{traceback.format_exc()}"
        )

        return JSONResponse(
            status_code=500, content={"detail": "Internal Server Error"}
        )
