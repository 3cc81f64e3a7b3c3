"""
Testes da grade mensal do calendário.
"""
from datetime import date
from types import SimpleNamespace

from apps.auditorias.calendario import (
    CABECALHO_SEMANA,
    MES_MAXIMO,
    MES_MINIMO,
    mes_anterior,
    mes_referencia,
    montar_calendario,
    proximo_mes,
)
from tests.conftest import data_local


def dias(grade):
    return [dia for semana in grade['semanas'] for dia in semana]


class TestMesReferencia:

    def test_parametro_valido(self):
        assert mes_referencia('2024-03') == date(2024, 3, 1)

    def test_parametro_invalido_cai_no_mes_atual(self):
        hoje = date(2024, 7, 19)
        assert mes_referencia('2024-13', hoje=hoje) == date(2024, 7, 1)
        assert mes_referencia('março', hoje=hoje) == date(2024, 7, 1)
        assert mes_referencia(None, hoje=hoje) == date(2024, 7, 1)


class TestNavegacao:

    def test_proximo_e_volta(self):
        marco = date(2024, 3, 1)
        assert proximo_mes(marco) == date(2024, 4, 1)
        assert mes_anterior(proximo_mes(marco)) == marco

    def test_virada_de_ano(self):
        assert proximo_mes(date(2024, 12, 1)) == date(2025, 1, 1)
        assert mes_anterior(date(2024, 1, 1)) == date(2023, 12, 1)


class TestMontarCalendario:

    def test_semana_comeca_no_domingo(self):
        grade = montar_calendario([], date(2024, 3, 1), hoje=date(2024, 3, 10))

        assert grade['cabecalho'] == CABECALHO_SEMANA
        assert CABECALHO_SEMANA[0] == 'Dom'
        assert all(semana[0]['data'].weekday() == 6 for semana in grade['semanas'])

    def test_grade_completa_do_mes(self):
        grade = montar_calendario([], date(2024, 3, 1), hoje=date(2024, 3, 10))
        todos = dias(grade)

        # 1º de março de 2024 foi uma sexta-feira
        assert todos[0]['data'] == date(2024, 2, 25)
        assert not todos[0]['do_mes']
        assert len([d for d in todos if d['do_mes']]) == 31
        assert len(todos) % 7 == 0

    def test_auditoria_no_dia_certo(self):
        visita = SimpleNamespace(titulo='Visita', data_agendada=data_local(2024, 3, 15))
        grade = montar_calendario([visita], date(2024, 3, 1), hoje=date(2024, 3, 10))

        com_auditoria = [d for d in dias(grade) if d['auditorias']]
        assert [d['data'] for d in com_auditoria] == [date(2024, 3, 15)]
        assert com_auditoria[0]['auditorias'] == [visita]

    def test_marca_hoje_e_navegacao(self):
        grade = montar_calendario([], date(2024, 3, 1), hoje=date(2024, 3, 10))

        assert [d['data'] for d in dias(grade) if d['hoje']] == [date(2024, 3, 10)]
        assert grade['titulo'] == 'março de 2024'
        assert grade['anterior'] == date(2024, 2, 1)
        assert grade['proximo'] == date(2024, 4, 1)

    def test_auditoria_de_outro_mes_fora_da_grade(self):
        visita = SimpleNamespace(titulo='Visita', data_agendada=data_local(2024, 5, 20))
        grade = montar_calendario([visita], date(2024, 3, 1), hoje=date(2024, 3, 10))

        assert not any(d['auditorias'] for d in dias(grade))


class TestLimitesDoCalendario:

    def test_meses_fora_do_alcance_caem_no_mes_atual(self):
        hoje = date(2024, 7, 19)
        assert mes_referencia('0001-01', hoje=hoje) == date(2024, 7, 1)
        assert mes_referencia('9999-12', hoje=hoje) == date(2024, 7, 1)

    def test_meses_extremos_montam_a_grade(self):
        primeiro = montar_calendario([], mes_referencia('0002-01'), hoje=date(2024, 7, 19))
        ultimo = montar_calendario([], mes_referencia('9998-12'), hoje=date(2024, 7, 19))

        assert dias(primeiro)[0]['data'] <= date(2, 1, 1)
        assert dias(ultimo)[-1]['data'] >= date(9998, 12, 31)
        assert len([d for d in dias(ultimo) if d['do_mes']]) == 31

    def test_navegacao_some_nos_limites(self):
        assert mes_anterior(MES_MINIMO) is None
        assert proximo_mes(MES_MAXIMO) is None

        grade = montar_calendario([], MES_MAXIMO, hoje=date(2024, 7, 19))
        assert grade['proximo'] is None
        assert grade['anterior'] == date(9998, 11, 1)

    def test_data_fora_do_intervalo_e_ajustada(self):
        grade = montar_calendario([], date(9999, 12, 1), hoje=date(2024, 7, 19))

        assert grade['mes'] == MES_MAXIMO
