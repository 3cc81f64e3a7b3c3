"""
Testes da tradução de exceções em mensagens.
"""
import pytest
from django.core.exceptions import ObjectDoesNotExist, PermissionDenied, ValidationError
from django.db import IntegrityError, OperationalError
from django.db.models import ProtectedError
from django.http import Http404

from apps.core.erros import (
    MENSAGEM_CONEXAO,
    MENSAGEM_CREDENCIAIS,
    MENSAGEM_EMAIL_DUPLICADO,
    MENSAGEM_GENERICA,
    MENSAGEM_NAO_ENCONTRADO,
    MENSAGEM_PERMISSAO,
    MENSAGEM_VINCULADOS,
    CredenciaisInvalidas,
    mensagem_erro,
    registrar_erro,
)


class TestMensagemErro:

    @pytest.mark.parametrize('exc', [
        OperationalError('could not connect to server'),
        ConnectionError('reset'),
        TimeoutError(),
    ])
    def test_conexao(self, exc):
        assert mensagem_erro(exc) == MENSAGEM_CONEXAO

    def test_credenciais(self):
        assert mensagem_erro(CredenciaisInvalidas('x@y.com')) == MENSAGEM_CREDENCIAIS

    def test_registro_vinculado(self):
        assert mensagem_erro(ProtectedError('protegido', set())) == MENSAGEM_VINCULADOS
        assert mensagem_erro(IntegrityError('FOREIGN KEY constraint failed')) == MENSAGEM_VINCULADOS

    def test_email_duplicado(self):
        erro = IntegrityError('UNIQUE constraint failed: usuario.email')
        assert mensagem_erro(erro) == MENSAGEM_EMAIL_DUPLICADO

    def test_permissao(self):
        assert mensagem_erro(PermissionDenied()) == MENSAGEM_PERMISSAO
        assert mensagem_erro(PermissionDenied('Só o responsável')) == 'Só o responsável'

    def test_nao_encontrado(self):
        assert mensagem_erro(ObjectDoesNotExist()) == MENSAGEM_NAO_ENCONTRADO
        assert mensagem_erro(Http404()) == MENSAGEM_NAO_ENCONTRADO

    def test_validacao_usa_a_propria_mensagem(self):
        erro = ValidationError('Este auditor está inativo', code='auditor_inativo')
        assert mensagem_erro(erro) == 'Este auditor está inativo'

    def test_qualquer_outra(self):
        assert mensagem_erro(RuntimeError('boom')) == MENSAGEM_GENERICA


class TestRegistrarErro:

    def test_erro_de_negocio_vira_aviso(self, caplog):
        with caplog.at_level('WARNING', logger='apps.core.erros'):
            mensagem = registrar_erro(ValidationError('Nada feito'), 'testar')

        assert mensagem == 'Nada feito'
        assert caplog.records[-1].levelname == 'WARNING'

    def test_erro_inesperado_registra_traceback(self, caplog):
        with caplog.at_level('WARNING', logger='apps.core.erros'):
            try:
                raise RuntimeError('boom')
            except RuntimeError as e:
                mensagem = registrar_erro(e, 'testar')

        assert mensagem == MENSAGEM_GENERICA
        assert caplog.records[-1].levelname == 'ERROR'
        assert caplog.records[-1].exc_info is not None
