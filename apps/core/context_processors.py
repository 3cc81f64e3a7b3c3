# apps/core/context_processors.py

from .permissions import AuditoriaPermissions


def permissoes(request):
    """Expõe as capacidades do usuário logado para os templates"""
    user = getattr(request, 'user', None)
    if user is None:
        return {'capacidades': frozenset()}
    return {'capacidades': AuditoriaPermissions.capacidades(user)}
