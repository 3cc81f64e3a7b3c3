# apps/core/erros.py

"""
Tradução de exceções para mensagens exibidas ao usuário

As views capturam qualquer exceção de uma ação e usam `mensagem_erro`
para mostrar um texto fixo em português, sem derrubar a tela.
"""

import logging

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied, ValidationError
from django.db import IntegrityError, InterfaceError, OperationalError
from django.db.models import ProtectedError, RestrictedError
from django.http import Http404

logger = logging.getLogger(__name__)

MENSAGEM_CONEXAO = "Erro de conexão. Verifique sua internet e tente novamente."
MENSAGEM_CREDENCIAIS = "Email ou senha incorretos"
MENSAGEM_EMAIL_DUPLICADO = "Este email já está em uso"
MENSAGEM_VINCULADOS = "Não é possível excluir este registro pois existem dados vinculados"
MENSAGEM_PERMISSAO = "Você não tem permissão para realizar esta ação"
MENSAGEM_NAO_ENCONTRADO = "Nenhum registro encontrado"
MENSAGEM_GENERICA = "Ocorreu um erro inesperado. Tente novamente."


class CredenciaisInvalidas(Exception):
    """Email ou senha não conferem"""


def _texto_integridade(exc) -> str:
    return str(exc).lower()


def mensagem_erro(exc) -> str:
    """Retorna a mensagem amigável correspondente à exceção"""
    if isinstance(exc, (OperationalError, InterfaceError, ConnectionError, TimeoutError)):
        return MENSAGEM_CONEXAO

    if isinstance(exc, CredenciaisInvalidas):
        return MENSAGEM_CREDENCIAIS

    if isinstance(exc, (ProtectedError, RestrictedError)):
        return MENSAGEM_VINCULADOS

    if isinstance(exc, IntegrityError):
        texto = _texto_integridade(exc)
        if 'foreign key' in texto:
            return MENSAGEM_VINCULADOS
        if 'unique' in texto or 'email' in texto or 'duplicate' in texto:
            return MENSAGEM_EMAIL_DUPLICADO
        return MENSAGEM_GENERICA

    if isinstance(exc, PermissionDenied):
        mensagem = str(exc)
        return mensagem or MENSAGEM_PERMISSAO

    if isinstance(exc, (ObjectDoesNotExist, Http404)):
        return MENSAGEM_NAO_ENCONTRADO

    if isinstance(exc, ValidationError):
        return ' '.join(exc.messages)

    return MENSAGEM_GENERICA


def registrar_erro(exc, acao: str) -> str:
    """
    Registra a exceção no log e devolve a mensagem para o usuário

    Erros de regra de negócio vão como warning, o resto com traceback.
    """
    if isinstance(exc, (ValidationError, PermissionDenied, ObjectDoesNotExist, Http404, CredenciaisInvalidas)):
        logger.warning(f"{acao}: {exc!r}")
    else:
        logger.exception(f"Erro inesperado em {acao}")
    return mensagem_erro(exc)
