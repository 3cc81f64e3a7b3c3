# apps/auditorias/apps.py

from django.apps import AppConfig


class AuditoriasConfig(AppConfig):
    """Configuração da app Auditorias"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.auditorias'
    verbose_name = 'Auditorias - Agenda e Relatórios'

    def ready(self):
        """Conecta os sinais de limpeza das fotos"""
        from . import signals  # noqa: F401
