from django.urls import path

from . import views

app_name = "events"
urlpatterns = [
    path("dashboard/", views.dashboard, name="dashboard"),
    path("create-event/", views.create_event, name="create_event"),
    path("event/<int:event_id>/", views.event_detail, name="event_detail"),
    path("event/<int:event_id>/register/", views.register, name="register"),
    path("event/<int:event_id>/unregister/", views.unregister, name="unregister"),
]
