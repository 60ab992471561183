import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from taskboard.config import CORS_ORIGINS
from taskboard.errors import TaskboardError
from taskboard.routers import auth, boards, invites, tasks

logger = logging.getLogger(__name__)

app = FastAPI(title="Taskboard")

app.add_middleware(
	CORSMiddleware,
	allow_origins=CORS_ORIGINS,
	allow_methods=["*"],
	allow_headers=["*"],
)

# API routers
app.include_router(auth.router)
app.include_router(boards.router)
app.include_router(invites.router)
app.include_router(tasks.router)


@app.exception_handler(TaskboardError)
async def taskboard_error_handler(request, exc: TaskboardError):
	return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


# Malformed bodies are reported like any other bad request, not as 422
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request, exc: RequestValidationError):
	errors = exc.errors()
	if errors:
		first = errors[0]
		field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
		message = f"Invalid {field}: {first.get('msg')}" if field else f"Invalid request: {first.get('msg')}"
	else:
		message = "Invalid request."
	return JSONResponse(status_code=400, content={"message": message})


# Generic error handler to return JSON errors for unexpected exceptions
@app.exception_handler(Exception)
async def generic_exception_handler(request, exc):
	logger.exception("Unhandled error on %s %s", request.method, request.url.path)
	return JSONResponse(status_code=500, content={"message": "Internal server error"})
