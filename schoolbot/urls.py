from django.urls import path
from . import views

urlpatterns = [
    path("", views.index_view, name="home"),

    # --- API ENDPOINTS ---
    path("api/ask", views.ask_api, name="ask_api"),
    path("api/health", views.health_api, name="health_api"),

    # --- ADMIN (staff only) ---
    path("api/admin/bot-stats", views.bot_stats_api, name="bot_stats_api"),
    path("api/admin/clear-cache", views.clear_cache_api, name="clear_cache_api"),
]
