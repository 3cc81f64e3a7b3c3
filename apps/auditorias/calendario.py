# apps/auditorias/calendario.py

import calendar
import re
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional

from django.utils import timezone

from apps.core.utils import MESES

# Semana começando no domingo
CABECALHO_SEMANA = ['Dom', 'Seg', 'Ter', 'Qua', 'Qui', 'Sex', 'Sáb']

_calendario = calendar.Calendar(firstweekday=calendar.SUNDAY)
_PADRAO_MES = re.compile(r'^(\d{4})-(\d{2})$')

# A grade inclui dias dos meses vizinhos; fora desse intervalo ela sairia do alcance de `date`
MES_MINIMO = date(2, 1, 1)
MES_MAXIMO = date(9998, 12, 1)


def mes_referencia(parametro: Optional[str] = None, hoje: Optional[date] = None) -> date:
    """
    Converte o parâmetro ?mes=AAAA-MM no primeiro dia do mês

    Parâmetro ausente, inválido ou fora de MES_MINIMO..MES_MAXIMO cai no mês atual.
    """
    hoje = hoje or timezone.localdate()
    correspondencia = _PADRAO_MES.match(parametro or '')
    if correspondencia:
        ano, mes = int(correspondencia.group(1)), int(correspondencia.group(2))
        if 1 <= mes <= 12 and MES_MINIMO.year <= ano <= MES_MAXIMO.year:
            return date(ano, mes, 1)
    return hoje.replace(day=1)


def mes_anterior(mes: date) -> Optional[date]:
    """Primeiro dia do mês anterior, ou None no limite inferior"""
    if mes <= MES_MINIMO:
        return None
    if mes.month == 1:
        return date(mes.year - 1, 12, 1)
    return date(mes.year, mes.month - 1, 1)


def proximo_mes(mes: date) -> Optional[date]:
    if mes >= MES_MAXIMO:
        return None
    if mes.month == 12:
        return date(mes.year + 1, 1, 1)
    return date(mes.year, mes.month + 1, 1)


def agrupar_por_dia(auditorias: Iterable) -> Dict[date, List]:
    """Agrupa auditorias pelo dia local de data_agendada"""
    por_dia = defaultdict(list)
    for auditoria in auditorias:
        por_dia[timezone.localtime(auditoria.data_agendada).date()].append(auditoria)
    return por_dia


def montar_calendario(auditorias: Iterable, mes: date, hoje: Optional[date] = None) -> Dict:
    """
    Monta a grade do mês com as auditorias de cada dia

    A grade contém todas as semanas que tocam o mês, inclusive os dias
    do mês anterior e do seguinte que completam a primeira e a última
    semana.
    """
    hoje = hoje or timezone.localdate()
    mes = min(max(mes.replace(day=1), MES_MINIMO), MES_MAXIMO)
    por_dia = agrupar_por_dia(auditorias)

    semanas = []
    for semana in _calendario.monthdatescalendar(mes.year, mes.month):
        semanas.append([
            {
                'data': dia,
                'do_mes': dia.month == mes.month,
                'hoje': dia == hoje,
                'auditorias': por_dia.get(dia, []),
            }
            for dia in semana
        ])

    return {
        'mes': mes,
        'titulo': f"{MESES[mes.month - 1]} de {mes.year}",
        'cabecalho': CABECALHO_SEMANA,
        'semanas': semanas,
        'anterior': mes_anterior(mes),
        'proximo': proximo_mes(mes),
    }
