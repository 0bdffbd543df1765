"""Settings page definitions for the dynamic driver setup flow.

A settings page holds a list of input settings. Every setting carries one
field object whose single key names the field type:

.. code-block:: json

    {"id": "address", "label": {"en": "Address"}, "field": {"text": {"value": "192.168.1.2"}}}
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import ConfigDict

from ucapi_model.schemas.base import WireModel
from ucapi_model.validation import U8, bounded_str

LanguageText = Dict[str, str]
# serialized untagged: 5 stays an int, 5.5 a float
IntOrFloat = Union[int, float]
SettingId = bounded_str(50, min_length=1)


class ConfirmationPage(WireModel):
    title: LanguageText
    message1: Optional[LanguageText] = None
    image: Optional[str] = None
    message2: Optional[LanguageText] = None


class Number(WireModel):
    value: IntOrFloat
    min: Optional[IntOrFloat] = None
    max: Optional[IntOrFloat] = None
    steps: Optional[int] = None
    decimals: Optional[U8] = None
    unit: Optional[LanguageText] = None


class Text(WireModel):
    value: Optional[str] = None
    regex: Optional[str] = None


class Textarea(WireModel):
    value: Optional[str] = None


class Password(WireModel):
    value: Optional[str] = None
    regex: Optional[str] = None


class Checkbox(WireModel):
    value: bool


class DropdownItem(WireModel):
    id: SettingId
    label: LanguageText


class Dropdown(WireModel):
    value: Optional[str] = None
    items: List[DropdownItem]


class Label(WireModel):
    # Static text to display next to the label
    value: LanguageText


class _FieldVariant(WireModel):
    model_config = ConfigDict(extra="forbid")


class NumberField(_FieldVariant):
    number: Number


class TextField(_FieldVariant):
    text: Text


class TextareaField(_FieldVariant):
    textarea: Textarea


class PasswordField(_FieldVariant):
    password: Password


class CheckboxField(_FieldVariant):
    checkbox: Checkbox


class DropdownField(_FieldVariant):
    dropdown: Dropdown


class LabelField(_FieldVariant):
    label: Label


SettingField = Union[NumberField, TextField, TextareaField, PasswordField, CheckboxField, DropdownField, LabelField]


class Setting(WireModel):
    id: SettingId
    label: LanguageText
    field: SettingField


class SettingsPage(WireModel):
    title: LanguageText
    settings: List[Setting]
