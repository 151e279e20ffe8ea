from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "location", "start_date", "status", "created_at"]
    list_filter = ["status", "category"]
    search_fields = ["name", "location", "organizer_name"]
    ordering = ["-created_at"]
