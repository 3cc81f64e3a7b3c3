# apps/auditorias/signals.py

import logging

from django.db import transaction
from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import FotoAuditoria

logger = logging.getLogger(__name__)


@receiver(post_delete, sender=FotoAuditoria)
def remover_arquivo_foto(sender, instance, **kwargs):
    """
    Remove o arquivo da foto do storage quando a linha é excluída

    Também dispara na exclusão em cascata da auditoria. O arquivo só é
    apagado depois do commit, assim um rollback não deixa linhas apontando
    para arquivos inexistentes.
    """
    if not instance.arquivo:
        return

    nome = instance.arquivo.name
    storage = instance.arquivo.storage

    def _apagar():
        try:
            storage.delete(nome)
            logger.debug(f"Arquivo removido do storage: {nome}")
        except Exception:
            # Sobra no storage; removido depois por limpar_fotos_orfas
            logger.exception(f"Falha ao remover arquivo {nome} do storage")

    transaction.on_commit(_apagar)
