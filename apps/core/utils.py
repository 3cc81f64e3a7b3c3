# apps/core/utils.py

import re
from datetime import datetime
from decimal import Decimal
from typing import Optional
from urllib.parse import quote

from django.conf import settings
from django.utils import timezone


MESES = [
    'janeiro', 'fevereiro', 'março', 'abril', 'maio', 'junho',
    'julho', 'agosto', 'setembro', 'outubro', 'novembro', 'dezembro',
]

DIAS_SEMANA = [
    'segunda-feira', 'terça-feira', 'quarta-feira', 'quinta-feira',
    'sexta-feira', 'sábado', 'domingo',
]

EMOJIS_STATUS = {
    'completed': '✅',
    'pending': '⏳',
    'cancelled': '❌',
}


def emoji_status(status: str) -> str:
    """Emoji exibido ao lado do status da auditoria"""
    return EMOJIS_STATUS.get(status, '')


def formatar_data_relativa(data: datetime, agora: Optional[datetime] = None) -> str:
    """
    Formata data relativa ao momento atual
    Ex: "hoje às 10:00", "amanhã às 14:30", "sexta-feira às 09:00"

    Datas a mais de uma semana de distância saem como dd/mm/aaaa.
    """
    agora = agora or timezone.now()
    data_local = timezone.localtime(data) if timezone.is_aware(data) else data
    agora_local = timezone.localtime(agora) if timezone.is_aware(agora) else agora

    diferenca = (data_local.date() - agora_local.date()).days
    hora = data_local.strftime('%H:%M')
    dia_semana = DIAS_SEMANA[data_local.weekday()]

    if diferenca < -6 or diferenca >= 7:
        return data_local.strftime('%d/%m/%Y')
    if diferenca < -1:
        artigo = 'último' if data_local.weekday() >= 5 else 'última'
        return f"{artigo} {dia_semana} às {hora}"
    if diferenca == -1:
        return f"ontem às {hora}"
    if diferenca == 0:
        return f"hoje às {hora}"
    if diferenca == 1:
        return f"amanhã às {hora}"
    return f"{dia_semana} às {hora}"


def formatar_data_extenso(data: datetime) -> str:
    """Ex: 15 de março de 2024 às 10:00"""
    data_local = timezone.localtime(data) if timezone.is_aware(data) else data
    return (
        f"{data_local.day:02d} de {MESES[data_local.month - 1]} de {data_local.year} "
        f"às {data_local.strftime('%H:%M')}"
    )


def formatar_moeda(valor) -> str:
    """
    Formata valor em reais
    Ex: Decimal('1234.5') -> "R$ 1.234,50"
    """
    if valor is None:
        return ''

    valor = Decimal(valor).quantize(Decimal('0.01'))
    texto = f"{abs(valor):,.2f}".replace(',', '_').replace('.', ',').replace('_', '.')
    sinal = '-' if valor < 0 else ''
    return f"{sinal}R$ {texto}"


def apenas_digitos(texto: str) -> str:
    return re.sub(r'\D', '', texto or '')


def formatar_telefone(telefone: str) -> str:
    """
    Aplica a máscara (00) 00000-0000 ou (00) 0000-0000

    Números com quantidade de dígitos inesperada voltam sem alteração.
    """
    digitos = apenas_digitos(telefone)

    if len(digitos) == 11:
        return f"({digitos[:2]}) {digitos[2:7]}-{digitos[7:]}"
    if len(digitos) == 10:
        return f"({digitos[:2]}) {digitos[2:6]}-{digitos[6:]}"
    return telefone or ''


def gerar_link_convite_whatsapp(telefone: str, nome: str, email: str, senha: str) -> str:
    """Link wa.me com a mensagem de convite e as credenciais de acesso"""
    mensagem = (
        f"Olá {nome}! Você foi cadastrado(a) como auditor no sistema Job Auditoria.\n\n"
        f"Seus dados de acesso são:\n"
        f"Email: {email}\n"
        f"Senha: {senha}\n\n"
        f"Acesse o sistema em: {settings.BASE_URL}"
    )
    return f"https://wa.me/{apenas_digitos(telefone)}?text={quote(mensagem)}"
