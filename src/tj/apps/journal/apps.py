from django.apps import AppConfig


class JournalConfig( AppConfig ):
    default_auto_field = "django.db.models.BigAutoField"
    name = "tj.apps.journal"
