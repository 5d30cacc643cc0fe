"""Dashboard display preferences (the settings page)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NotificationPreferences(_CamelModel):
    email: bool = True
    push: bool = True
    sms: bool = False


class DisplayPreferences(_CamelModel):
    dark_mode: bool = False
    compact_view: bool = False
    show_avatars: bool = True


class PrivacyPreferences(_CamelModel):
    show_email: bool = True
    show_salary: bool = False
    allow_export: bool = True


class Preferences(_CamelModel):
    company_name: str = Field(default="Acme Corporation", min_length=1)
    email: EmailStr = "admin@acme.com"
    timezone: str = "America/New_York"
    language: str = "en"
    date_format: str = "MM/DD/YYYY"
    currency: str = "USD"
    notifications: NotificationPreferences = Field(default_factory=NotificationPreferences)
    display: DisplayPreferences = Field(default_factory=DisplayPreferences)
    privacy: PrivacyPreferences = Field(default_factory=PrivacyPreferences)


class NotificationPreferencesUpdate(_CamelModel):
    email: bool | None = None
    push: bool | None = None
    sms: bool | None = None


class DisplayPreferencesUpdate(_CamelModel):
    dark_mode: bool | None = None
    compact_view: bool | None = None
    show_avatars: bool | None = None


class PrivacyPreferencesUpdate(_CamelModel):
    show_email: bool | None = None
    show_salary: bool | None = None
    allow_export: bool | None = None


class PreferencesUpdate(_CamelModel):
    """Partial preferences; nested groups merge key by key."""

    company_name: str | None = Field(default=None, min_length=1)
    email: EmailStr | None = None
    timezone: str | None = None
    language: str | None = None
    date_format: str | None = None
    currency: str | None = None
    notifications: NotificationPreferencesUpdate | None = None
    display: DisplayPreferencesUpdate | None = None
    privacy: PrivacyPreferencesUpdate | None = None
