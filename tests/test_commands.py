"""
Testes dos comandos de manutenção.
"""
from io import StringIO

import pytest
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from django.core.management import call_command

from apps.core.models import Usuario


@pytest.mark.django_db
class TestCriarAdmin:

    def test_cria_administrador(self):
        call_command('criar_admin', email='chefe@auditoria.com', senha='segredo1', stdout=StringIO())

        usuario = Usuario.objects.get(email='chefe@auditoria.com')
        assert usuario.is_admin
        assert usuario.is_superuser
        assert usuario.check_password('segredo1')

    def test_promove_usuario_existente(self, auditor):
        call_command('criar_admin', email=auditor.email, senha='segredo1', stdout=StringIO())

        auditor.refresh_from_db()
        assert auditor.is_admin
        assert Usuario.objects.filter(email=auditor.email).count() == 1


@pytest.mark.django_db
class TestLimparFotosOrfas:

    def test_dry_run_nao_apaga(self):
        default_storage.save('audit-photos/424242/a.png', ContentFile(b'a'))
        saida = StringIO()

        call_command('limpar_fotos_orfas', dry_run=True, stdout=saida)

        assert 'audit-photos/424242' in saida.getvalue()
        assert default_storage.exists('audit-photos/424242/a.png')

    def test_apaga_apenas_orfas(self, auditoria):
        default_storage.save('audit-photos/424242/a.png', ContentFile(b'a'))
        default_storage.save(f'audit-photos/{auditoria.pk}/b.png', ContentFile(b'b'))

        call_command('limpar_fotos_orfas', stdout=StringIO())

        assert not default_storage.exists('audit-photos/424242/a.png')
        assert default_storage.exists(f'audit-photos/{auditoria.pk}/b.png')

    def test_nada_para_limpar(self):
        saida = StringIO()

        call_command('limpar_fotos_orfas', stdout=saida)

        assert 'Nenhuma foto órfã' in saida.getvalue()
