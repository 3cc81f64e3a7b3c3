"""
Testes do serviço de autenticação: cadastro, login e convite.
"""
import pytest
from django.contrib.auth.models import AnonymousUser
from django.contrib.sessions.backends.cache import SessionStore
from django.core.exceptions import PermissionDenied
from django.test import RequestFactory

from apps.core.auth_service import auth_service
from apps.core.models import Usuario


@pytest.fixture
def dados_cadastro():
    return {
        'nome': 'Carla Dias',
        'email': 'Carla@Exemplo.com',
        'telefone': '11987654321',
        'idade': 25,
        'cidade_residencia': 'Campinas',
        'senha': 'segredo1',
        'confirmar_senha': 'segredo1',
    }


@pytest.fixture
def requisicao():
    request = RequestFactory().post('/login/')
    request.session = SessionStore()
    request.user = AnonymousUser()
    return request


@pytest.mark.django_db
class TestRegistrarAuditor:

    def test_cadastro_valido(self, dados_cadastro):
        sucesso, mensagem, usuario = auth_service.registrar_auditor(dados_cadastro)

        assert sucesso, mensagem
        assert usuario.email == 'carla@exemplo.com'
        assert usuario.username == 'carla@exemplo.com'
        assert usuario.tipo == Usuario.TIPO_AUDITOR
        assert usuario.telefone == '(11) 98765-4321'
        assert usuario.check_password('segredo1')

    @pytest.mark.parametrize('campo, valor, esperado', [
        ('nome', '', 'Campo Nome é obrigatório'),
        ('email', 'sem-arroba', 'Email inválido'),
        ('senha', '123', 'A senha deve ter pelo menos 6 caracteres'),
        ('confirmar_senha', 'outra123', 'As senhas não coincidem'),
        ('idade', 17, 'É necessário ter pelo menos 18 anos'),
        ('idade', 'abc', 'Idade inválida'),
        ('telefone', '123', 'Telefone deve estar no formato (00) 00000-0000'),
    ])
    def test_dados_invalidos(self, dados_cadastro, campo, valor, esperado):
        dados_cadastro[campo] = valor

        sucesso, mensagem, usuario = auth_service.registrar_auditor(dados_cadastro)

        assert not sucesso
        assert mensagem == esperado
        assert usuario is None
        assert not Usuario.objects.filter(email__iexact='carla@exemplo.com').exists()

    def test_email_repetido(self, auditor, dados_cadastro):
        dados_cadastro['email'] = 'ANA@auditoria.com'

        sucesso, mensagem, _ = auth_service.registrar_auditor(dados_cadastro)

        assert not sucesso
        assert mensagem == 'Este email já está em uso'


@pytest.mark.django_db
class TestCriarAuditor:

    def test_admin_cria_e_recebe_link(self, admin, dados_cadastro):
        sucesso, mensagem, usuario, link = auth_service.criar_auditor(admin, dados_cadastro)

        assert sucesso
        assert mensagem == 'Auditor adicionado com sucesso'
        assert usuario.limite_auditorias == 3
        assert link.startswith('https://wa.me/11987654321?text=')

    def test_sem_telefone_sem_link(self, admin, dados_cadastro):
        dados_cadastro['telefone'] = ''

        sucesso, _, _, link = auth_service.criar_auditor(admin, dados_cadastro)

        assert sucesso
        assert link is None

    def test_auditor_nao_cria_auditor(self, auditor, dados_cadastro):
        with pytest.raises(PermissionDenied):
            auth_service.criar_auditor(auditor, dados_cadastro)


@pytest.mark.django_db
class TestLogin:

    def test_login_pelo_email(self, auditor, requisicao):
        sucesso, mensagem = auth_service.fazer_login(requisicao, 'ANA@auditoria.com', 'senha123')

        assert sucesso
        assert mensagem == 'Bem-vindo, Ana Souza!'
        assert requisicao.user == auditor

    def test_sem_lembrar_me_expira_ao_fechar_navegador(self, auditor, requisicao):
        auth_service.fazer_login(requisicao, 'ana@auditoria.com', 'senha123', lembrar_me=False)

        assert requisicao.session.get_expire_at_browser_close()

    def test_lembrar_me_mantem_sessao(self, auditor, requisicao):
        auth_service.fazer_login(requisicao, 'ana@auditoria.com', 'senha123', lembrar_me=True)

        assert not requisicao.session.get_expire_at_browser_close()
        assert requisicao.session.get_expiry_age() == 86400 * 30

    def test_senha_errada(self, auditor, requisicao):
        sucesso, mensagem = auth_service.fazer_login(requisicao, 'ana@auditoria.com', 'errada')

        assert not sucesso
        assert mensagem == 'Email ou senha incorretos'

    def test_email_desconhecido(self, db, requisicao):
        sucesso, mensagem = auth_service.fazer_login(requisicao, 'ninguem@x.com', 'senha123')

        assert not sucesso
        assert mensagem == 'Email ou senha incorretos'

    def test_logout(self, auditor, requisicao):
        auth_service.fazer_login(requisicao, 'ana@auditoria.com', 'senha123')

        assert auth_service.fazer_logout(requisicao) is True
        assert not requisicao.user.is_authenticated
