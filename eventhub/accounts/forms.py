# accounts/forms.py
from django import forms
from django.contrib.auth import get_user_model
from django.contrib.auth.forms import AuthenticationForm, UserCreationForm
from django.core.exceptions import ValidationError

from eventhub.exceptions import DuplicateEmail, InvalidCredentials

from .models import Role
from .services import normalise_email

ROLE_LABELS = (
    (Role.ATTENDEE, "Attend events"),
    (Role.ORGANISER, "Organize events"),
)


class SignInForm(AuthenticationForm):
    error_messages = {
        **AuthenticationForm.error_messages,
        "invalid_login": InvalidCredentials.default_message,
    }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["username"].label = "Email"
        self.fields["username"].widget = forms.EmailInput(
            attrs={"class": "form-control", "placeholder": "you@example.com", "autofocus": True}
        )
        self.fields["password"].widget.attrs.update({"class": "form-control"})

    def clean(self):
        username = self.cleaned_data.get("username")
        if username:
            self.cleaned_data["username"] = normalise_email(username)
        return super().clean()


class SignupForm(UserCreationForm):
    full_name = forms.CharField(
        label="Full Name",
        max_length=150,
        widget=forms.TextInput(attrs={"placeholder": "John Doe"}),
    )
    email = forms.EmailField(
        label="Email",
        widget=forms.EmailInput(attrs={"placeholder": "you@example.com"}),
    )
    role = forms.ChoiceField(
        label="I want to",
        choices=ROLE_LABELS,
        initial=Role.ATTENDEE,
        widget=forms.RadioSelect,
    )

    class Meta:
        model = get_user_model()
        fields = ("email",)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Bootstrap styling
        for name in ["full_name", "email", "password1", "password2"]:
            self.fields[name].widget.attrs.update({"class": "form-control"})

    def clean_email(self):
        email = normalise_email(self.cleaned_data.get("email"))
        User = get_user_model()
        if User.objects.filter(username__iexact=email).exists():
            raise ValidationError(DuplicateEmail.default_message)
        return email

    def clean(self):
        cleaned = super().clean()
        # the password similarity validator looks at these
        self.instance.username = cleaned.get("email") or ""
        self.instance.first_name = cleaned.get("full_name") or ""
        return cleaned
