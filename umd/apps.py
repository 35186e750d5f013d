from django.apps import AppConfig


class UmdConfig(AppConfig):
    name = "umd"
    verbose_name = "UMD wiki markup"
