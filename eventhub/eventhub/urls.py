from django.urls import path

from . import views

app_name = "eventhub"
urlpatterns = [
    path("", views.index, name="index"),
]
