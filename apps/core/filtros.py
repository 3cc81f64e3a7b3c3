# apps/core/filtros.py

"""
Busca e filtro das listas (auditores, clientes e auditorias)

Tudo é feito em memória sobre a coleção já carregada, sem paginação.
A busca é uma substring sem diferenciar maiúsculas em qualquer um dos
campos configurados; o filtro de status é exato.
"""

from typing import Callable, Dict, Iterable, List, Sequence

FILTRO_TODOS = 'all'

# Cada regra recebe o item e diz se ele passa no filtro
Regras = Dict[str, Callable[[object], bool]]

REGRAS_ATIVO: Regras = {
    'active': lambda item: bool(item.ativo),
    'inactive': lambda item: not item.ativo,
}

REGRAS_AUDITORIA: Regras = {
    'active': lambda item: item.status == 'pending',
    'inactive': lambda item: item.status != 'pending',
    'pending': lambda item: item.status == 'pending',
    'resolved': lambda item: item.status in ('completed', 'cancelled'),
}

CAMPOS_AUDITORES = ('nome', 'email', 'telefone')
CAMPOS_CLIENTES = ('nome', 'cidade', 'estado')
CAMPOS_AUDITORIAS = ('titulo', 'local')


def _valor_texto(item, campo: str) -> str:
    valor = getattr(item, campo, None)
    if valor is None:
        return ''
    return str(valor).lower()


def filtrar_colecao(
    itens: Iterable,
    busca: str = '',
    campos: Sequence[str] = (),
    filtro: str = FILTRO_TODOS,
    regras: Regras = None,
) -> List:
    """
    Aplica busca textual e filtro de status a uma coleção

    Mantém a ordem de entrada. Busca vazia com filtro 'all' devolve a
    coleção inteira. Filtros desconhecidos levantam ValueError.
    """
    regras = regras or {}
    filtro = filtro or FILTRO_TODOS

    if filtro != FILTRO_TODOS and filtro not in regras:
        raise ValueError(f"Filtro desconhecido: {filtro}")

    termo = (busca or '').strip().lower()
    regra = regras.get(filtro)

    resultado = []
    for item in itens:
        if termo and not any(termo in _valor_texto(item, campo) for campo in campos):
            continue
        if regra is not None and not regra(item):
            continue
        resultado.append(item)

    return resultado


def filtrar_auditores(auditores, busca='', filtro=FILTRO_TODOS):
    return filtrar_colecao(auditores, busca, CAMPOS_AUDITORES, filtro, REGRAS_ATIVO)


def filtrar_clientes(clientes, busca='', filtro=FILTRO_TODOS):
    return filtrar_colecao(clientes, busca, CAMPOS_CLIENTES, filtro, REGRAS_ATIVO)


def filtrar_auditorias(auditorias, busca='', filtro=FILTRO_TODOS):
    return filtrar_colecao(auditorias, busca, CAMPOS_AUDITORIAS, filtro, REGRAS_AUDITORIA)
