from django.apps import AppConfig


class AdvisorConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'pathway_connect.advisor'
    verbose_name = 'Career advisor'
