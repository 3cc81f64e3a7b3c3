# apps/relatorios/apps.py

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class RelatoriosConfig(AppConfig):
    """Configuração da app Relatórios"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.relatorios'
    verbose_name = 'Relatórios - Painel & Exports'

    def ready(self):
        logger.debug("Relatorios App inicializada - ReportLab e XlsxWriter habilitados")
