from io import BytesIO

from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.base import ContentFile
from PIL import Image, ImageOps  # for EXIF orientation fix

from .models import Event

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/webp"}
DATETIME_INPUT_FORMATS = ["%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M", "%Y-%m-%d %H:%M:%S"]


class EventForm(forms.ModelForm):
    start_date = forms.DateTimeField(
        input_formats=DATETIME_INPUT_FORMATS,
        widget=forms.DateTimeInput(
            attrs={"type": "datetime-local", "class": "form-control"},
            format="%Y-%m-%dT%H:%M",
        ),
    )
    end_date = forms.DateTimeField(
        input_formats=DATETIME_INPUT_FORMATS,
        widget=forms.DateTimeInput(
            attrs={"type": "datetime-local", "class": "form-control"},
            format="%Y-%m-%dT%H:%M",
        ),
    )
    max_attendees = forms.IntegerField(
        required=False,
        min_value=1,
        widget=forms.NumberInput(attrs={"class": "form-control", "placeholder": "Unlimited"}),
    )

    class Meta:
        model = Event
        fields = [
            "title",
            "description",
            "image",
            "start_date",
            "end_date",
            "location",
            "max_attendees",
        ]
        widgets = {
            "title": forms.TextInput(attrs={"class": "form-control"}),
            "description": forms.Textarea(attrs={"class": "form-control", "rows": 4}),
            "location": forms.TextInput(attrs={"class": "form-control"}),
            "image": forms.ClearableFileInput(attrs={"class": "form-control"}),
        }

    def clean_image(self):
        """
        Validate and normalize the uploaded image:
        - Size limit from EVENTHUB_MAX_IMAGE_MB
        - Allow JPEG/PNG/WebP
        - Verify it's an image
        - Fix EXIF orientation, convert to RGB
        - Re-encode as JPEG (strips EXIF/metadata)
        """
        file = self.cleaned_data.get("image")
        if not file or not hasattr(file, "content_type"):
            return file  # optional, or unchanged existing file

        max_bytes = settings.EVENTHUB_MAX_IMAGE_MB * 1024 * 1024
        if getattr(file, "size", 0) and file.size > max_bytes:
            raise ValidationError(
                f"Please upload an image smaller than {settings.EVENTHUB_MAX_IMAGE_MB}MB."
            )

        if file.content_type and file.content_type not in ALLOWED_IMAGE_TYPES:
            raise ValidationError("Only JPEG, PNG, or WebP images are allowed.")

        try:
            file.seek(0)
            img = Image.open(file)
            img.verify()  # integrity check; closes parser state
        except Exception:
            raise ValidationError("That file is not a valid image.")

        file.seek(0)
        img = Image.open(file)
        img = ImageOps.exif_transpose(img)
        if img.mode != "RGB":
            img = img.convert("RGB")

        buf = BytesIO()
        img.save(buf, format="JPEG", optimize=True, quality=85)
        buf.seek(0)

        base_name = (
            getattr(file, "name", "event").rsplit(".", 1)[0] or "event"
        ).replace(" ", "_")
        return ContentFile(buf.read(), name=f"{base_name}.jpg")
