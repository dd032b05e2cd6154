from django.apps import AppConfig


class UpdatePointsConfig(AppConfig):
    name = "modules.update_points"
    label = "update_points"
