from django import forms
from django.contrib import admin

from .models import AIConfiguration, Club, News, Program, SchoolFact

# --- KONFIGURASI HEADER ADMIN ---
admin.site.site_header = "Chatbot Sekolah Administration"
admin.site.site_title = "Chatbot Sekolah Admin"
admin.site.index_title = "Kelola data sekolah & konfigurasi AI"


@admin.register(SchoolFact)
class SchoolFactAdmin(admin.ModelAdmin):
    list_display = ("key", "short_value", "updated_at")
    search_fields = ("key", "value")
    readonly_fields = ("updated_at",)

    def short_value(self, obj):
        return obj.value[:60] + "..." if len(obj.value) > 60 else obj.value
    short_value.short_description = "Value"


@admin.register(Program)
class ProgramAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "updated_at")
    search_fields = ("code", "name", "description")


@admin.register(Club)
class ClubAdmin(admin.ModelAdmin):
    list_display = ("name", "supervisor", "schedule")
    search_fields = ("name", "supervisor")


@admin.register(News)
class NewsAdmin(admin.ModelAdmin):
    list_display = ("title", "date", "link", "created_at")
    search_fields = ("title", "excerpt")
    readonly_fields = ("created_at",)


class AIConfigurationAdminForm(forms.ModelForm):
    api_key = forms.CharField(
        required=False,
        label="Gemini API Key",
        widget=forms.PasswordInput(render_value=True),
        help_text="Kosongkan jika ingin fallback ke GEMINI_API_KEY dari environment.",
    )

    class Meta:
        model = AIConfiguration
        fields = ("name", "is_active", "api_key", "model", "timeout", "temperature")


@admin.register(AIConfiguration)
class AIConfigurationAdmin(admin.ModelAdmin):
    form = AIConfigurationAdminForm
    list_display = ("id", "name", "is_active", "model", "timeout", "temperature", "updated_at")
    list_filter = ("is_active",)
