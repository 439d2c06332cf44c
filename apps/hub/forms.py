"""
Typed request forms for the JSON API.

Devices post either form-encoded or JSON bodies; both end up in one of
these forms. `bind()` validates and returns cleaned data, or raises the
hub ValidationError (HTTP 400).
"""

from django import forms

from .errors import ValidationError


# Largest primary key SQLite can store
MAX_ID = 2 ** 63 - 1


class ReadingField(forms.FloatField):
    """FloatField that also rejects integers too large for a float."""

    def to_python(self, value):
        try:
            return super().to_python(value)
        except OverflowError:
            raise forms.ValidationError(self.error_messages["invalid"], code="invalid")


class IdField(forms.IntegerField):

    def __init__(self, **kwargs):
        kwargs.setdefault("min_value", 1)
        kwargs.setdefault("max_value", MAX_ID)
        super().__init__(**kwargs)


class WeatherForm(forms.Form):
    uuid = forms.CharField(max_length=36)
    temperature = ReadingField()
    humidity = ReadingField()
    pressure = ReadingField()


class WeatherQueryForm(forms.Form):
    limit = forms.IntegerField(required=False, min_value=1)
    uuid = forms.CharField(required=False, max_length=36)


class DeviceRegistrationForm(forms.Form):
    name = forms.CharField(max_length=100)
    version = forms.CharField(max_length=32)
    address = forms.CharField(max_length=64)
    uuid = forms.CharField(required=False, max_length=36)


class DeviceUpdateForm(forms.Form):
    id = IdField()
    name = forms.CharField(max_length=100)
    # Room id; null clears the assignment
    room = IdField(required=False)
    # Room name, accepted from older dashboards
    location = forms.CharField(required=False, max_length=100)


class RoomForm(forms.Form):
    name = forms.CharField(max_length=100)


class RoomUpdateForm(forms.Form):
    id = IdField()
    name = forms.CharField(max_length=100)


class IdForm(forms.Form):
    id = IdField()


def _summarize(errors) -> str:
    parts = []
    for field, messages in errors.items():
        parts.append(f"{field}: {' '.join(messages)}")
    return "Bad request - " + "; ".join(parts)


def bind(form_class, data) -> dict:
    form = form_class(data)
    if not form.is_valid():
        raise ValidationError(_summarize(form.errors))
    return form.cleaned_data
