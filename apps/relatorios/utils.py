# apps/relatorios/utils.py

from collections import Counter
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from django.conf import settings
from django.core.exceptions import ObjectDoesNotExist
from django.utils import timezone

from apps.auditorias.calendario import proximo_mes
from apps.core.utils import emoji_status, formatar_moeda


def calcular_resumo_auditorias(auditorias: Iterable, agora: Optional[datetime] = None) -> Dict:
    """
    Calcula os números do painel a partir da coleção completa de auditorias

    - total e contagem por status
    - auditorias no mês corrente e no próximo mês (fuso local)
    - locais mais visitados, com empates na ordem em que aparecem
    - próximas auditorias pendentes, da mais próxima para a mais distante
    """
    agora = agora or timezone.now()
    auditorias = list(auditorias)

    mes_atual = timezone.localtime(agora).date().replace(day=1)
    mes_seguinte = proximo_mes(mes_atual)

    por_status = Counter(a.status for a in auditorias)
    locais = Counter(a.local for a in auditorias)

    este_mes = 0
    proximo = 0
    for auditoria in auditorias:
        dia = timezone.localtime(auditoria.data_agendada).date()
        if (dia.year, dia.month) == (mes_atual.year, mes_atual.month):
            este_mes += 1
        elif mes_seguinte and (dia.year, dia.month) == (mes_seguinte.year, mes_seguinte.month):
            proximo += 1

    proximas = sorted(
        (a for a in auditorias if a.status == 'pending' and a.data_agendada > agora),
        key=lambda a: a.data_agendada
    )[:settings.AUDITORIA_PROXIMAS_LIMITE]

    return {
        'total': len(auditorias),
        'pendentes': por_status.get('pending', 0),
        'concluidas': por_status.get('completed', 0),
        'canceladas': por_status.get('cancelled', 0),
        'este_mes': este_mes,
        'proximo_mes': proximo,
        'top_locais': [
            {'local': local, 'total': total}
            for local, total in locais.most_common(settings.AUDITORIA_TOP_LOCAIS_LIMITE)
        ],
        'proximas': proximas,
    }


def resumo_para_json(resumo: Dict) -> Dict:
    """Versão serializável do resumo para a API"""
    dados = {chave: valor for chave, valor in resumo.items() if chave != 'proximas'}
    dados['proximas'] = [
        {
            'id': auditoria.pk,
            'titulo': auditoria.titulo,
            'local': auditoria.local,
            'data_agendada': auditoria.data_agendada.isoformat(),
            'auditor': str(auditoria.auditor),
        }
        for auditoria in resumo['proximas']
    ]
    return dados


CABECALHO_EXPORTACAO = [
    'ID', 'Título', 'Local', 'Cliente', 'Data', 'Auditor',
    'Status', 'Valor Total', 'Nota Fiscal',
]


# Caracteres que fazem planilhas interpretarem o texto como fórmula
PREFIXOS_FORMULA = ('=', '+', '-', '@', '\t', '\r')


def celula_segura(valor):
    """Texto vindo do usuário com prefixo de fórmula sai como literal (prefixo ')"""
    if isinstance(valor, str) and valor.startswith(PREFIXOS_FORMULA):
        return f"'{valor}"
    return valor


def gerar_linhas_exportacao(auditorias: Iterable) -> List[List]:
    """
    Linhas da exportação (CSV/Excel) da lista de auditorias

    Espera auditorias com select_related de auditor, cliente e relatorio.
    """
    linhas = []
    for auditoria in auditorias:
        try:
            relatorio = auditoria.relatorio
        except ObjectDoesNotExist:
            relatorio = None
        linhas.append([
            auditoria.pk,
            celula_segura(auditoria.titulo),
            celula_segura(auditoria.local),
            celula_segura(auditoria.cliente.nome) if auditoria.cliente else '',
            timezone.localtime(auditoria.data_agendada).strftime('%d/%m/%Y %H:%M'),
            celula_segura(str(auditoria.auditor)),
            f"{emoji_status(auditoria.status)} {auditoria.get_status_display()}",
            formatar_moeda(relatorio.valor_total) if relatorio else '',
            celula_segura(relatorio.numero_nota_fiscal) if relatorio else '',
        ])
    return linhas
