# schoolbot/views.py
import json
import logging

from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.csrf import csrf_exempt

from . import service

logger = logging.getLogger(__name__)


def _rid(request) -> str:
    return getattr(request, "request_id", "-")


def _log_extra(request) -> dict:
    return {"request_id": _rid(request)}


def _is_staff(request) -> bool:
    user = getattr(request, "user", None)
    return bool(user and user.is_authenticated and user.is_staff)


def index_view(request):
    return JsonResponse(
        {
            "message": "Chatbot sekolah API is running!",
            "endpoints": {
                "health": "/api/health",
                "chat": "/api/ask",
                "admin": "/api/admin/bot-stats",
                "clear_cache": "/api/admin/clear-cache",
            },
        }
    )


@csrf_exempt
def ask_api(request):
    if request.method != "POST":
        logger.warning(f" [ASK] Method not allowed method={request.method}", extra=_log_extra(request))
        return JsonResponse({"status": "error", "msg": "Method not allowed"}, status=405)

    try:
        data = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning(" [ASK] Invalid JSON", extra=_log_extra(request))
        return JsonResponse({"status": "error", "msg": "Invalid JSON"}, status=400)
    if not isinstance(data, dict):
        return JsonResponse({"status": "error", "msg": "Invalid JSON"}, status=400)

    question = str(data.get("question") or data.get("message") or "")
    q_preview = question if len(question) <= 120 else question[:120] + "..."
    logger.info(f" [ASK REQUEST] q='{q_preview}'", extra=_log_extra(request))

    payload = service.answer_question(question, request_id=_rid(request))

    logger.info(
        f" [ASK RESPONSE] len={len(payload.get('answer', ''))} quick_replies={len(payload.get('quickReplies') or [])}",
        extra=_log_extra(request),
    )
    return JsonResponse(payload)


def health_api(request):
    health = service.database_health()
    return JsonResponse(
        {
            "status": health.get("status", "error"),
            "message": "Server is running",
            "timestamp": timezone.now().isoformat(),
            "database": health,
        }
    )


def bot_stats_api(request):
    if not _is_staff(request):
        return JsonResponse({"status": "error", "msg": "Forbidden"}, status=403)
    return JsonResponse(
        {
            "status": "success",
            "cache": service.get_cache_stats(max_keys=10),
            "timestamp": timezone.now().isoformat(),
        }
    )


@csrf_exempt
def clear_cache_api(request):
    if request.method != "POST":
        return JsonResponse({"status": "error", "msg": "Method not allowed"}, status=405)
    if not _is_staff(request):
        return JsonResponse({"status": "error", "msg": "Forbidden"}, status=403)
    service.clear_cache()
    logger.info(" [ADMIN] Response cache cleared", extra=_log_extra(request))
    return JsonResponse({"status": "success", "message": "Cache cleared successfully"})
