from django.apps import AppConfig


class TravelConfig( AppConfig ):
    default_auto_field = "django.db.models.BigAutoField"
    name = "tj.apps.travel"
