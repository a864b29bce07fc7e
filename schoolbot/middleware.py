import logging
import re
import time
import uuid

logger = logging.getLogger("request")

# Request id dari proxy dipakai ulang kalau formatnya aman untuk log.
_INCOMING_ID_RE = re.compile(r"[A-Za-z0-9_-]{6,64}")


def _client_ip(request) -> str:
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR") or ""
    if forwarded:
        return forwarded.split(",")[0].strip() or "-"
    return request.META.get("REMOTE_ADDR") or "-"


def _request_id(request) -> str:
    incoming = str(request.META.get("HTTP_X_REQUEST_ID") or "").strip()
    if _INCOMING_ID_RE.fullmatch(incoming):
        return incoming
    return uuid.uuid4().hex[:10]


class RequestContextMiddleware:
    """Beri setiap request chatbot sebuah id dan tulis satu baris access log per response."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.request_id = _request_id(request)
        started = time.perf_counter()
        response = None
        try:
            response = self.get_response(request)
            response["X-Request-ID"] = request.request_id
            return response
        finally:
            self._log_access(request, response, int((time.perf_counter() - started) * 1000))

    def _log_access(self, request, response, dur_ms: int) -> None:
        status = getattr(response, "status_code", 500)
        ip = _client_ip(request)
        level = logging.WARNING if status >= 500 else logging.INFO
        logger.log(
            level,
            "HTTP %s %s -> %s (%sms) ip=%s",
            request.method,
            request.path,
            status,
            dur_ms,
            ip,
            extra={
                "request_id": request.request_id,
                "ip": ip,
                "method": request.method,
                "path": request.path,
                "status": status,
                "duration_ms": dur_ms,
            },
        )
