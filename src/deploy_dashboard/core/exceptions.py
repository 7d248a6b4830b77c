from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException


class ProblemDetails(BaseModel):
    type: str = "about:blank"
    title: str
    status: int
    detail: str | None = None
    instance: str | None = None


async def http_exception_handler(request: Request, exc: HTTPException):
    problem = ProblemDetails(title="HTTP Error", status=exc.status_code, detail=exc.detail, instance=str(request.url))
    return JSONResponse(status_code=exc.status_code, content=problem.model_dump())


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    problem = ProblemDetails(title="Validation Error", status=422, detail=str(exc), instance=str(request.url))
    return JSONResponse(status_code=422, content=problem.model_dump())


async def generic_exception_handler(request: Request, exc: Exception):
    problem = ProblemDetails(
        title="Internal Server Error", status=500, detail="An unexpected error occurred.", instance=str(request.url)
    )
    return JSONResponse(status_code=500, content=problem.model_dump())
