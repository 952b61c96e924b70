from django.urls import path

from . import views

app_name = "accounts"

urlpatterns = [
    path("", views.auth_page, name="auth"),
    path("logout/", views.sign_out, name="logout"),
]
