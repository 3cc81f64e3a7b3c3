"""
Testes das capacidades por tipo de usuário.
"""
import pytest
from django.contrib.auth.models import AnonymousUser
from django.core.exceptions import PermissionDenied

from apps.core.permissions import CAPACIDADES, AuditoriaPermissions, exigir_capacidade


@pytest.mark.django_db
class TestCapacidades:

    def test_admin_tem_todas(self, admin):
        assert AuditoriaPermissions.capacidades(admin) == CAPACIDADES['admin']
        assert AuditoriaPermissions.tem_capacidade(admin, 'excluir_auditoria')

    def test_auditor_apenas_envia_relatorio(self, auditor):
        assert AuditoriaPermissions.capacidades(auditor) == frozenset({'enviar_relatorio'})
        assert not AuditoriaPermissions.tem_capacidade(auditor, 'gerenciar_auditores')
        assert not AuditoriaPermissions.tem_capacidade(auditor, 'exportar_relatorios')

    def test_anonimo_nao_tem_nada(self):
        assert AuditoriaPermissions.capacidades(AnonymousUser()) == frozenset()

    def test_capacidade_acompanha_mudanca_de_tipo(self, auditor):
        auditor.tipo = 'admin'
        assert AuditoriaPermissions.tem_capacidade(auditor, 'criar_auditoria')

    def test_exigir_capacidade(self, auditor):
        with pytest.raises(PermissionDenied):
            exigir_capacidade(auditor, 'cancelar_auditoria')


@pytest.mark.django_db
class TestAcessoAuditoria:

    def test_responsavel_e_admin(self, admin, auditor, auditoria):
        assert AuditoriaPermissions.pode_ver_auditoria(auditor, auditoria)
        assert AuditoriaPermissions.pode_ver_auditoria(admin, auditoria)
        assert AuditoriaPermissions.pode_enviar_relatorio(auditor, auditoria)
        assert AuditoriaPermissions.pode_enviar_relatorio(admin, auditoria)

    def test_outro_auditor(self, outro_auditor, auditoria):
        assert not AuditoriaPermissions.pode_ver_auditoria(outro_auditor, auditoria)
        assert not AuditoriaPermissions.pode_enviar_relatorio(outro_auditor, auditoria)

    def test_anonimo(self, auditoria):
        assert not AuditoriaPermissions.pode_ver_auditoria(AnonymousUser(), auditoria)
