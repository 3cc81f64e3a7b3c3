"""
Testes dos formulários.
"""
import pytest

from apps.auditorias.forms import AuditoriaForm
from apps.core.forms import FiltroAuditoriaForm, FiltroListaForm, RegistroAuditorForm


class TestFiltros:

    def test_valores_validos(self):
        assert FiltroListaForm({'busca': 'ana', 'filtro': 'inactive'}).valores() == ('ana', 'inactive')

    def test_sem_parametros(self):
        assert FiltroListaForm({}).valores() == ('', 'all')

    def test_filtro_de_outra_lista_cai_em_todos(self):
        assert FiltroListaForm({'filtro': 'pending'}).valores() == ('', 'all')
        assert FiltroAuditoriaForm({'filtro': 'pending'}).valores() == ('', 'pending')


class TestRegistroAuditor:

    def test_senhas_diferentes(self):
        form = RegistroAuditorForm({
            'nome': 'Carla', 'email': 'carla@exemplo.com', 'idade': 20,
            'senha': 'segredo1', 'confirmar_senha': 'outra123',
        })

        assert not form.is_valid()
        assert 'confirmar_senha' in form.errors


@pytest.mark.django_db
class TestAuditoriaForm:

    def test_exige_local_ou_cliente(self, auditor):
        form = AuditoriaForm({
            'titulo': 'Visita', 'data_agendada': '2024-03-15T10:00', 'auditor': auditor.pk,
        })

        assert not form.is_valid()
        assert 'local' in form.errors

    def test_oferece_apenas_auditores_ativos(self, auditor, outro_auditor, admin):
        outro_auditor.ativo = False
        outro_auditor.save()

        assert list(AuditoriaForm().fields['auditor'].queryset) == [auditor]
