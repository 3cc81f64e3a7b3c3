# apps/core/permissions.py

from functools import wraps

from django.contrib import messages
from django.core.exceptions import PermissionDenied
from django.shortcuts import redirect


# Capacidades por tipo de usuário - avaliadas a cada operação
CAPACIDADES = {
    'admin': frozenset({
        'gerenciar_auditores',
        'gerenciar_clientes',
        'criar_auditoria',
        'cancelar_auditoria',
        'excluir_auditoria',
        'enviar_relatorio',
        'ver_todas_auditorias',
        'exportar_relatorios',
    }),
    'auditor': frozenset({
        'enviar_relatorio',
    }),
}


class AuditoriaPermissions:
    """
    Sistema de permissões do Job Auditoria
    Baseado nos tipos de usuário: admin e auditor
    """

    @staticmethod
    def capacidades(user):
        """Conjunto de capacidades do usuário (vazio se anônimo)"""
        if not user.is_authenticated:
            return frozenset()
        return CAPACIDADES.get(user.tipo, frozenset())

    @staticmethod
    def tem_capacidade(user, capacidade):
        return capacidade in AuditoriaPermissions.capacidades(user)

    @staticmethod
    def is_admin(user):
        """Verifica se é administrador"""
        return user.is_authenticated and user.tipo == 'admin'

    @staticmethod
    def is_auditor(user):
        """Verifica se é auditor"""
        return user.is_authenticated and user.tipo == 'auditor'

    @staticmethod
    def pode_ver_auditoria(user, auditoria):
        """Admin vê todas; auditor apenas as atribuídas a ele"""
        if not user.is_authenticated:
            return False

        if AuditoriaPermissions.tem_capacidade(user, 'ver_todas_auditorias'):
            return True

        return auditoria.auditor_id == user.id

    @staticmethod
    def pode_enviar_relatorio(user, auditoria):
        """Apenas o auditor responsável ou um admin"""
        if not AuditoriaPermissions.tem_capacidade(user, 'enviar_relatorio'):
            return False

        if AuditoriaPermissions.is_admin(user):
            return True

        return auditoria.auditor_id == user.id


def exigir_capacidade(user, capacidade, mensagem=None):
    """Levanta PermissionDenied se o usuário não tiver a capacidade"""
    if not AuditoriaPermissions.tem_capacidade(user, capacidade):
        raise PermissionDenied(mensagem or 'Você não tem permissão para realizar esta ação')


# Decoradores para views

def requer_capacidade(capacidade, mensagem='Acesso não autorizado'):
    """Decorador que exige uma capacidade do usuário logado"""

    def decorator(view_func):
        @wraps(view_func)
        def wrapped_view(request, *args, **kwargs):
            if not AuditoriaPermissions.tem_capacidade(request.user, capacidade):
                messages.error(request, mensagem)
                return redirect('relatorios:painel')
            return view_func(request, *args, **kwargs)

        return wrapped_view

    return decorator


requer_admin = requer_capacidade('gerenciar_auditores', 'Acesso negado. Apenas administradores.')


def requer_acesso_auditoria(view_func):
    """
    Decorador que verifica acesso à auditoria
    Espera que a view receba auditoria_id como parâmetro
    """

    @wraps(view_func)
    def wrapped_view(request, auditoria_id, *args, **kwargs):
        from apps.auditorias.models import Auditoria

        try:
            auditoria = Auditoria.objects.select_related('auditor', 'cliente').get(id=auditoria_id)
        except Auditoria.DoesNotExist:
            messages.error(request, 'Auditoria não encontrada')
            return redirect('auditorias:calendario')

        if not AuditoriaPermissions.pode_ver_auditoria(request.user, auditoria):
            messages.error(request, 'Você não tem acesso a esta auditoria.')
            return redirect('auditorias:calendario')

        # Adiciona a auditoria ao request para uso na view
        request.auditoria = auditoria
        return view_func(request, auditoria_id, *args, **kwargs)

    return wrapped_view
