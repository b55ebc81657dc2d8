"""Structured logging setup and the per-request catalog logging middleware.

Every request gets a request id and, when it targets a catalog resource, the
entity kind and record id bound into structlog contextvars.  Service and
error-handler events emitted while the request runs carry those fields.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from ecospace.config import LogFormat, get_settings
from ecospace.routes.catalog import RESOURCE_KINDS

SERVICE_NAME = "ecospace"
REQUEST_ID_HEADER = "x-request-id"
_MAX_REQUEST_ID_LENGTH = 128
_HEALTH_PATHS = frozenset({"/health", "/health/ready"})

_configured = False


def _add_service_name(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
	event_dict.setdefault("service", SERVICE_NAME)
	return event_dict


def _build_processors(log_format: LogFormat) -> list[Any]:
	processors: list[Any] = [
		structlog.contextvars.merge_contextvars,
		_add_service_name,
		structlog.processors.add_log_level,
		structlog.processors.TimeStamper(fmt="iso", utc=True),
	]
	if log_format == LogFormat.json:
		processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
	else:
		processors += [structlog.dev.ConsoleRenderer()]
	return processors


def configure_structured_logging() -> None:
	"""Configure structlog (and the stdlib root logger) once per process."""
	global _configured
	if _configured:
		return

	settings = get_settings()
	log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
	logging.basicConfig(
		level=log_level,
		format="%(message)s" if settings.log_format == LogFormat.json else logging.BASIC_FORMAT,
	)
	structlog.configure(
		processors=_build_processors(settings.log_format),
		wrapper_class=structlog.make_filtering_bound_logger(log_level),
		logger_factory=structlog.PrintLoggerFactory(),
		cache_logger_on_first_use=True,
	)
	_configured = True


def resolve_catalog_resource(path: str, api_prefix: str) -> dict[str, str]:
	"""Map ``/api/v1/pest-types/<id>`` to ``{"entity": "pest_type", "record_id": "<id>"}``.

	Paths outside the API prefix or naming an unknown resource resolve to ``{}``.
	"""
	prefix = api_prefix.rstrip("/")
	if prefix and not (path == prefix or path.startswith(prefix + "/")):
		return {}
	segments = [segment for segment in path[len(prefix) :].split("/") if segment]
	if not segments or segments[0] not in RESOURCE_KINDS:
		return {}
	resource = {"entity": RESOURCE_KINDS[segments[0]]}
	if len(segments) > 1:
		resource["record_id"] = segments[1]
	return resource


def _request_id(request: Request) -> str:
	supplied = request.headers.get(REQUEST_ID_HEADER, "").strip()
	if supplied and len(supplied) <= _MAX_REQUEST_ID_LENGTH:
		return supplied
	return str(uuid.uuid4())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
	"""Bind request context for catalog logs and emit one summary event per request."""

	async def dispatch(self, request: Request, call_next):  # type: ignore[override]
		request_id = _request_id(request)
		request.state.request_id = request_id
		resource = resolve_catalog_resource(request.url.path, get_settings().api_prefix)

		structlog.contextvars.clear_contextvars()
		structlog.contextvars.bind_contextvars(
			request_id=request_id,
			method=request.method,
			**resource,
		)

		logger = structlog.get_logger("ecospace.request")
		start = time.perf_counter()
		try:
			response = await call_next(request)
		except Exception:
			logger.exception(
				"http_request_failed",
				path=request.url.path,
				duration_ms=round((time.perf_counter() - start) * 1000.0, 2),
			)
			raise

		response.headers[REQUEST_ID_HEADER] = request_id
		if response.status_code >= 500:
			log = logger.error
		elif response.status_code >= 400:
			log = logger.warning
		elif request.url.path in _HEALTH_PATHS:
			log = logger.debug
		else:
			log = logger.info
		log(
			"http_request",
			path=request.url.path,
			status_code=response.status_code,
			duration_ms=round((time.perf_counter() - start) * 1000.0, 2),
		)
		return response
