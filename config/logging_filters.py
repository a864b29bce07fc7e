_DEFAULTS = {
    "request_id": "-",
    "ip": "-",
    "method": "-",
    "path": "-",
    "status": "-",
    "duration_ms": "-",
}

_STATUS_COLORS = (
    (200, 300, "\x1b[32m"),
    (400, 500, "\x1b[33m"),
    (500, 600, "\x1b[31m"),
)


class RequestIdFilter:
    """
    Melengkapi record log dengan field request (request_id, ip, status, ...).
    Field yang belum ada diisi '-' agar formatter tidak error.
    """

    def filter(self, record):
        for name, default in _DEFAULTS.items():
            if not hasattr(record, name):
                setattr(record, name, default)
        record.status_color = ""
        try:
            st = int(record.status)
        except (TypeError, ValueError):
            return True
        for low, high, color in _STATUS_COLORS:
            if low <= st < high:
                record.status_color = color
                break
        return True
