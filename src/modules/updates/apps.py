from django.apps import AppConfig


class UpdatesConfig(AppConfig):
    name = "modules.updates"
    label = "updates"
