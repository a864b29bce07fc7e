from django.apps import AppConfig


class SchoolbotConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "schoolbot"
    verbose_name = "Chatbot Sekolah"
