from django.contrib import admin

from .models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "start_date", "location", "max_attendees", "organiser")
    list_filter = ("start_date",)
    search_fields = ("title", "location")
