"""
Testes do resumo do painel e das linhas de exportação.
"""
from types import SimpleNamespace

import pytest

from apps.auditorias.services import auditoria_service
from apps.relatorios.utils import (
    CABECALHO_EXPORTACAO,
    calcular_resumo_auditorias,
    celula_segura,
    gerar_linhas_exportacao,
    resumo_para_json,
)
from tests.conftest import data_local

AGORA = data_local(2024, 3, 10, 9, 0)


def auditoria(local, data, status='pending', pk=1):
    return SimpleNamespace(
        pk=pk, titulo=f'Visita {local}', local=local, data_agendada=data,
        status=status, auditor='Ana',
    )


class TestCalcularResumo:

    def test_contagens_por_status(self):
        auditorias = [
            auditoria('A', data_local(2024, 3, 15)),
            auditoria('A', data_local(2024, 3, 1), 'completed'),
            auditoria('B', data_local(2024, 4, 2), 'cancelled'),
            auditoria('C', data_local(2024, 6, 1)),
        ]

        resumo = calcular_resumo_auditorias(auditorias, agora=AGORA)

        assert resumo['total'] == 4
        assert resumo['pendentes'] == 2
        assert resumo['concluidas'] == 1
        assert resumo['canceladas'] == 1
        assert resumo['este_mes'] == 2
        assert resumo['proximo_mes'] == 1

    def test_colecao_vazia(self):
        resumo = calcular_resumo_auditorias([], agora=AGORA)

        assert resumo['total'] == 0
        assert resumo['top_locais'] == []
        assert resumo['proximas'] == []

    def test_top_locais_com_empate_estavel(self):
        auditorias = [
            auditoria('Centro', data_local(2024, 3, 1)),
            auditoria('Praia', data_local(2024, 3, 2)),
            auditoria('Shopping', data_local(2024, 3, 3)),
            auditoria('Parque', data_local(2024, 3, 4)),
            auditoria('Praia', data_local(2024, 3, 5)),
        ]

        resumo = calcular_resumo_auditorias(auditorias, agora=AGORA)

        assert resumo['top_locais'] == [
            {'local': 'Praia', 'total': 2},
            {'local': 'Centro', 'total': 1},
            {'local': 'Shopping', 'total': 1},
        ]

    def test_proximas_em_ordem_e_limitadas(self):
        datas = [data_local(2024, 3, dia) for dia in (30, 12, 20, 11, 25, 28, 15)]
        auditorias = [auditoria(f'L{i}', d, pk=i) for i, d in enumerate(datas)]
        auditorias.append(auditoria('Passada', data_local(2024, 3, 5)))
        auditorias.append(auditoria('Concluída', data_local(2024, 3, 11, 8), 'completed'))

        resumo = calcular_resumo_auditorias(auditorias, agora=AGORA)

        assert [a.data_agendada.day for a in resumo['proximas']] == [11, 12, 15, 20, 25]

    def test_resumo_para_json(self):
        resumo = calcular_resumo_auditorias(
            [auditoria('Centro', data_local(2024, 3, 12), pk=7)], agora=AGORA
        )

        dados = resumo_para_json(resumo)

        assert dados['proximas'][0]['id'] == 7
        assert dados['proximas'][0]['auditor'] == 'Ana'
        assert dados['proximas'][0]['data_agendada'].startswith('2024-03-12T10:00')
        assert dados['top_locais'] == [{'local': 'Centro', 'total': 1}]


@pytest.mark.django_db
class TestLinhasExportacao:

    def test_linha_com_e_sem_relatorio(
        self, admin, auditor, auditoria_com_fotos, dados_relatorio, dados_auditoria
    ):
        sem_relatorio = auditoria_service.criar_auditoria(admin, dados_auditoria)
        auditoria_service.enviar_relatorio(auditor, auditoria_com_fotos.pk, dados_relatorio)

        auditorias = admin.get_auditorias_visiveis().select_related('relatorio').order_by('pk')
        linhas = gerar_linhas_exportacao(auditorias)

        assert len(linhas[0]) == len(CABECALHO_EXPORTACAO)
        assert linhas[0][0] == auditoria_com_fotos.pk
        assert linhas[0][4] == '15/03/2024 10:00'
        assert linhas[0][6] == '✅ Concluída'
        assert linhas[0][7] == 'R$ 89,90'
        assert linhas[0][8] == 'NF-123'
        assert linhas[1][0] == sem_relatorio.pk
        assert linhas[1][6] == '⏳ Pendente'
        assert linhas[1][7:] == ['', '']

    def test_texto_com_formula_sai_como_literal(self, admin, dados_auditoria):
        auditoria_service.criar_auditoria(
            admin, {**dados_auditoria, 'titulo': '=HYPERLINK("http://x")', 'local': '@SUM(A1)'}
        )

        linha = gerar_linhas_exportacao(admin.get_auditorias_visiveis())[0]

        assert linha[1] == '\'=HYPERLINK("http://x")'
        assert linha[2] == "'@SUM(A1)"


class TestCelulaSegura:

    @pytest.mark.parametrize('valor', ['=1+1', '+55 11', '-2', '@cmd', '\tx', '\rx'])
    def test_prefixa_inicio_de_formula(self, valor):
        assert celula_segura(valor) == f"'{valor}"

    @pytest.mark.parametrize('valor', ['Visita Sabor', '', 'R$ 89,90', 42, None])
    def test_demais_valores_intactos(self, valor):
        assert celula_segura(valor) == valor
