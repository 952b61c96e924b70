# accounts/views.py
import logging

from django.conf import settings
from django.contrib.auth import login as auth_login
from django.contrib.auth import logout as auth_logout
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods

from eventhub.exceptions import AuthError, InvalidCredentials
from eventhub.notifications import notify_error, notify_success

from .forms import SignInForm, SignupForm
from .services import sign_up

logger = logging.getLogger(__name__)

SIGN_IN = "signin"
SIGN_UP = "signup"


def _safe_next(request):
    next_url = request.POST.get("next") or request.GET.get("next")
    if next_url and url_has_allowed_host_and_scheme(
        next_url,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return next_url
    return settings.LOGIN_REDIRECT_URL


def _render_auth(request, signin_form, signup_form, active_tab, status=200):
    return render(
        request,
        "accounts/auth.html",
        {
            "signin_form": signin_form,
            "signup_form": signup_form,
            "active_tab": active_tab,
            "next": request.POST.get("next") or request.GET.get("next", ""),
        },
        status=status,
    )


@require_http_methods(["GET", "POST"])
def auth_page(request):
    """Sign-in and sign-up on one page; ``action`` picks the form."""
    if request.method == "GET":
        active = SIGN_UP if request.GET.get("tab") == SIGN_UP else SIGN_IN
        return _render_auth(request, SignInForm(request), SignupForm(), active)

    action = request.POST.get("action", SIGN_IN)
    if action == SIGN_UP:
        return _handle_sign_up(request)
    return _handle_sign_in(request)


def _handle_sign_in(request):
    form = SignInForm(request, data=request.POST)
    if form.is_valid():
        if request.user.is_authenticated:
            auth_logout(request)
        auth_login(request, form.get_user())
        notify_success(request, "Welcome back!", "Successfully signed in.")
        return redirect(_safe_next(request))

    error = InvalidCredentials()
    non_field = form.non_field_errors()
    if non_field:
        error = InvalidCredentials(non_field[0])
    notify_error(request, "Sign in failed", error)
    return _render_auth(request, form, SignupForm(), SIGN_IN)


def _handle_sign_up(request):
    form = SignupForm(request.POST)
    if form.is_valid():
        if request.user.is_authenticated:
            auth_logout(request)
        try:
            user = sign_up(
                email=form.cleaned_data["email"],
                password=form.cleaned_data["password1"],
                full_name=form.cleaned_data["full_name"],
                role=form.cleaned_data["role"],
            )
        except AuthError as exc:
            form.add_error("email", exc.message)
            notify_error(request, "Sign up failed", exc)
            return _render_auth(request, SignInForm(request), form, SIGN_UP)

        auth_login(request, user, backend="django.contrib.auth.backends.ModelBackend")
        notify_success(
            request,
            "Account created!",
            "Welcome to EventHub. You can now start exploring events.",
        )
        return redirect(_safe_next(request))

    first_error = next(iter(form.errors.values()))[0]
    notify_error(request, "Sign up failed", first_error)
    return _render_auth(request, SignInForm(request), form, SIGN_UP)


@require_http_methods(["POST"])
def sign_out(request):
    auth_logout(request)
    notify_success(request, "Signed out", "You have been successfully signed out.")
    return redirect(settings.LOGOUT_REDIRECT_URL)
