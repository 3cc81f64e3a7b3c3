"""
Testes das funções de formatação.
"""
from decimal import Decimal
from urllib.parse import unquote

from apps.core.utils import (
    emoji_status,
    formatar_data_extenso,
    formatar_data_relativa,
    formatar_moeda,
    formatar_telefone,
    gerar_link_convite_whatsapp,
)
from tests.conftest import data_local

# Domingo, 10 de março de 2024
AGORA = data_local(2024, 3, 10, 9, 0)


class TestDataRelativa:

    def test_hoje_amanha_ontem(self):
        assert formatar_data_relativa(data_local(2024, 3, 10, 14, 30), AGORA) == 'hoje às 14:30'
        assert formatar_data_relativa(data_local(2024, 3, 11, 8, 0), AGORA) == 'amanhã às 08:00'
        assert formatar_data_relativa(data_local(2024, 3, 9, 18, 0), AGORA) == 'ontem às 18:00'

    def test_mesma_semana(self):
        assert formatar_data_relativa(data_local(2024, 3, 15, 10, 0), AGORA) == 'sexta-feira às 10:00'

    def test_dias_passados(self):
        assert formatar_data_relativa(data_local(2024, 3, 6), AGORA) == 'última quarta-feira às 10:00'

    def test_longe_vira_data(self):
        assert formatar_data_relativa(data_local(2024, 3, 17), AGORA) == '17/03/2024'
        assert formatar_data_relativa(data_local(2024, 2, 20), AGORA) == '20/02/2024'


def test_data_extenso():
    assert formatar_data_extenso(data_local(2024, 3, 15)) == '15 de março de 2024 às 10:00'


def test_emoji_status():
    assert emoji_status('pending') == '⏳'
    assert emoji_status('completed') == '✅'
    assert emoji_status('cancelled') == '❌'
    assert emoji_status('outro') == ''


class TestMoeda:

    def test_milhar_e_centavos(self):
        assert formatar_moeda(Decimal('1234.5')) == 'R$ 1.234,50'

    def test_zero_e_vazio(self):
        assert formatar_moeda(0) == 'R$ 0,00'
        assert formatar_moeda(None) == ''


class TestTelefone:

    def test_celular(self):
        assert formatar_telefone('11987654321') == '(11) 98765-4321'

    def test_fixo(self):
        assert formatar_telefone('1133334444') == '(11) 3333-4444'

    def test_mascara_reaplicada(self):
        assert formatar_telefone('(11) 98765-4321') == '(11) 98765-4321'

    def test_quantidade_inesperada(self):
        assert formatar_telefone('12345') == '12345'


def test_link_convite_whatsapp(settings):
    settings.BASE_URL = 'https://auditoria.exemplo.com'

    link = gerar_link_convite_whatsapp('(11) 98765-4321', 'Ana', 'ana@auditoria.com', 'senha123')

    assert link.startswith('https://wa.me/11987654321?text=')
    mensagem = unquote(link.split('?text=', 1)[1])
    assert 'Olá Ana!' in mensagem
    assert 'Email: ana@auditoria.com' in mensagem
    assert 'Senha: senha123' in mensagem
    assert 'https://auditoria.exemplo.com' in mensagem
