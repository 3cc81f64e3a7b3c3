# apps/core/templatetags/formatacao.py

from django import template

from apps.core import utils

register = template.Library()


@register.filter
def emoji_status(status):
    return utils.emoji_status(status)


@register.filter
def data_relativa(data):
    if not data:
        return ''
    return utils.formatar_data_relativa(data)


@register.filter
def data_extenso(data):
    if not data:
        return ''
    return utils.formatar_data_extenso(data)


@register.filter
def moeda(valor):
    return utils.formatar_moeda(valor)


@register.filter
def telefone(valor):
    return utils.formatar_telefone(valor)


@register.filter
def tem_capacidade(capacidades, capacidade):
    """Uso: {% if capacidades|tem_capacidade:'criar_auditoria' %}"""
    return capacidade in (capacidades or ())
