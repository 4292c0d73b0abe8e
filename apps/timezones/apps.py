from django.apps import AppConfig


class TimezonesConfig(AppConfig):
    name = "apps.timezones"
    label = "timezones"
