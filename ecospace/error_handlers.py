"""Global exception handlers for the catalog API.

Invariants:
    - CatalogError -> its own status code and ``to_response()`` body
    - RequestValidationError -> 400 with the same ``{message, errors}`` shape
    - Exception (catch-all) -> 500, never leaks internal details
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ecospace.errors import CatalogError

_logger = structlog.get_logger("ecospace.errors")


def register_error_handlers(app: FastAPI) -> None:
	"""Register all global error handlers on the FastAPI app."""
	_register_catalog_error_handler(app)
	_register_validation_error_handler(app)
	_register_generic_error_handler(app)


def _register_catalog_error_handler(app: FastAPI) -> None:
	@app.exception_handler(CatalogError)
	async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
		log = _logger.error if exc.status_code >= 500 else _logger.info
		log(
			"catalog_error",
			error_type=type(exc).__name__,
			status_code=exc.status_code,
			message=exc.message,
			path=request.url.path,
		)
		return JSONResponse(status_code=exc.status_code, content=exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:
	@app.exception_handler(RequestValidationError)
	async def validation_error_handler(
		request: Request,
		exc: RequestValidationError,
	) -> JSONResponse:
		_logger.info("request_validation_failed", path=request.url.path, error_count=len(exc.errors()))
		return JSONResponse(
			status_code=status.HTTP_400_BAD_REQUEST,
			content=_build_validation_error_response(exc),
		)


def _register_generic_error_handler(app: FastAPI) -> None:
	@app.exception_handler(Exception)
	async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
		"""Catch-all — never leaks internal details."""
		_logger.error(
			"unhandled_exception",
			path=request.url.path,
			error=str(exc),
			exc_info=exc,
		)
		return JSONResponse(
			status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
			content={"message": "Internal server error"},
		)


def _field_path(loc: Any) -> str:
	# drop the "body" / "query" / "path" origin prefix
	parts = [str(part) for part in loc]
	if len(parts) > 1 and parts[0] in {"body", "query", "path", "header"}:
		parts = parts[1:]
	return ".".join(parts)


def _build_validation_error_response(exc: RequestValidationError) -> dict[str, Any]:
	return {
		"message": "Validation error",
		"errors": [
			{"field": _field_path(error["loc"]), "message": error["msg"]}
			for error in exc.errors()
		],
	}
