# apps/core/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.cache import cache
from django.db import transaction
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.utils import timezone
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods, require_POST

from .auth_service import auth_service
from .erros import registrar_erro
from .filtros import filtrar_auditores, filtrar_clientes
from .forms import AuditorForm, ClienteForm, FiltroListaForm, LoginForm, RegistroAuditorForm
from .models import Cliente, Usuario
from .permissions import requer_admin, requer_capacidade

logger = logging.getLogger(__name__)


# =================== AUTENTICAÇÃO ===================

def login_view(request):
    """
    View de login usando serviço encapsulado

    A view cuida do HTTP; a autenticação fica no auth_service.
    """
    if request.user.is_authenticated:
        return redirect('relatorios:painel')

    form = LoginForm()

    if request.method == 'POST':
        form = LoginForm(request.POST)

        if form.is_valid():
            sucesso, mensagem = auth_service.fazer_login(
                request,
                form.cleaned_data['email'],
                form.cleaned_data['senha'],
                form.cleaned_data['lembrar_me']
            )

            if sucesso:
                messages.success(request, mensagem)
                next_url = request.GET.get('next')
                if not next_url or not url_has_allowed_host_and_scheme(
                    next_url,
                    allowed_hosts={request.get_host()},
                    require_https=request.is_secure(),
                ):
                    next_url = 'relatorios:painel'
                return redirect(next_url)

            messages.error(request, mensagem)

    context = {
        'title': 'Login - Job Auditoria',
        'form': form,
    }

    return render(request, 'core/login.html', context)


def registro_view(request):
    """Auto-cadastro de auditores"""
    if request.user.is_authenticated:
        return redirect('relatorios:painel')

    form = RegistroAuditorForm()

    if request.method == 'POST':
        form = RegistroAuditorForm(request.POST)

        if form.is_valid():
            sucesso, mensagem, _ = auth_service.registrar_auditor(form.cleaned_data)

            if sucesso:
                messages.success(request, mensagem)
                return redirect('core:login')

            messages.error(request, mensagem)

    context = {
        'title': 'Cadastro de Auditor - Job Auditoria',
        'form': form
    }

    return render(request, 'core/registro.html', context)


def logout_view(request):
    auth_service.fazer_logout(request)
    messages.info(request, 'Você foi desconectado com sucesso.')
    return redirect('core:login')


# =================== AUDITORES ===================

@login_required
@requer_admin
def auditores_lista(request):
    """
    Lista de auditores com busca e filtro de status

    Requisições HTMX recebem apenas a tabela.
    """
    busca, filtro = FiltroListaForm(request.GET).valores()
    auditores = Usuario.objects.filter(tipo=Usuario.TIPO_AUDITOR).order_by('nome', 'email')

    context = {
        'title': 'Auditores',
        'auditores': filtrar_auditores(auditores, busca, filtro),
        'filtro_form': FiltroListaForm(initial={'busca': busca, 'filtro': filtro}),
        'link_convite': request.session.pop('link_convite', None),
    }

    template = 'core/partials/auditores_tabela.html' if request.htmx else 'core/auditores.html'
    return render(request, template, context)


@login_required
@requer_admin
@require_http_methods(['GET', 'POST'])
def auditor_criar(request):
    form = AuditorForm(request.POST or None)

    if request.method == 'POST' and form.is_valid():
        sucesso, mensagem, _, link_convite = auth_service.criar_auditor(
            request.user, form.cleaned_data
        )

        if sucesso:
            messages.success(request, mensagem)
            if link_convite:
                request.session['link_convite'] = link_convite
            return redirect('core:auditores')

        messages.error(request, mensagem)

    return render(request, 'core/auditor_form.html', {
        'title': 'Novo Auditor',
        'form': form,
    })


@login_required
@requer_admin
@require_POST
def auditor_alternar_status(request, usuario_id):
    auditor = get_object_or_404(Usuario, pk=usuario_id, tipo=Usuario.TIPO_AUDITOR)

    try:
        with transaction.atomic():
            auditor.ativo = not auditor.ativo
            auditor.save(update_fields=['ativo', 'atualizado_em'])
        messages.success(
            request,
            f"Auditor {'ativado' if auditor.ativo else 'desativado'} com sucesso"
        )
        logger.info(f"Auditor {auditor.email} ativo={auditor.ativo} por {request.user.email}")
    except Exception as e:
        # A linha devolvida reflete o banco, não a troca que falhou
        auditor.refresh_from_db()
        messages.error(request, registrar_erro(e, 'alternar status do auditor'))

    if request.htmx:
        return render(request, 'core/partials/auditor_linha.html', {'auditor': auditor})
    return redirect('core:auditores')


@login_required
@requer_admin
@require_POST
def auditor_excluir(request, usuario_id):
    """Auditores com auditorias vinculadas não podem ser excluídos"""
    auditor = get_object_or_404(Usuario, pk=usuario_id, tipo=Usuario.TIPO_AUDITOR)

    try:
        with transaction.atomic():
            auditor.delete()
        messages.success(request, 'Auditor excluído com sucesso')
        logger.info(f"Auditor {usuario_id} excluído por {request.user.email}")
    except Exception as e:
        messages.error(request, registrar_erro(e, 'excluir auditor'))

    return redirect('core:auditores')


# =================== CLIENTES ===================

@login_required
@requer_capacidade('gerenciar_clientes', 'Acesso negado. Apenas administradores.')
def clientes_lista(request):
    busca, filtro = FiltroListaForm(request.GET).valores()

    context = {
        'title': 'Clientes',
        'clientes': filtrar_clientes(Cliente.objects.order_by('nome'), busca, filtro),
        'filtro_form': FiltroListaForm(initial={'busca': busca, 'filtro': filtro}),
    }

    template = 'core/partials/clientes_tabela.html' if request.htmx else 'core/clientes.html'
    return render(request, template, context)


@login_required
@requer_capacidade('gerenciar_clientes', 'Acesso negado. Apenas administradores.')
@require_http_methods(['GET', 'POST'])
def cliente_form(request, cliente_id=None):
    """Cria ou edita um cliente"""
    cliente = get_object_or_404(Cliente, pk=cliente_id) if cliente_id else None
    form = ClienteForm(request.POST or None, instance=cliente)

    if request.method == 'POST' and form.is_valid():
        try:
            cliente = form.save()
            messages.success(
                request,
                'Cliente atualizado com sucesso' if cliente_id else 'Cliente criado com sucesso'
            )
            logger.info(f"Cliente {cliente.pk} salvo por {request.user.email}")
            return redirect('core:clientes')
        except Exception as e:
            messages.error(request, registrar_erro(e, 'salvar cliente'))

    return render(request, 'core/cliente_form.html', {
        'title': 'Editar Cliente' if cliente_id else 'Novo Cliente',
        'form': form,
        'cliente': cliente,
    })


@login_required
@requer_capacidade('gerenciar_clientes', 'Acesso negado. Apenas administradores.')
@require_POST
def cliente_excluir(request, cliente_id):
    cliente = get_object_or_404(Cliente, pk=cliente_id)

    try:
        cliente.delete()
        messages.success(request, 'Cliente excluído com sucesso')
        logger.info(f"Cliente {cliente_id} excluído por {request.user.email}")
    except Exception as e:
        messages.error(request, registrar_erro(e, 'excluir cliente'))

    return redirect('core:clientes')


# =================== MONITORAMENTO ===================

def health_check(request):
    """
    Health check para monitoramento
    """
    try:
        # Verificar conexão com banco
        Usuario.objects.exists()

        # Verificar cache (Redis em produção)
        cache.set('health_check', 'ok', 60)
        cache.get('health_check')

        status = {
            'status': 'healthy',
            'database': 'ok',
            'cache': 'ok',
            'timestamp': timezone.now().isoformat(),
        }

        return JsonResponse(status)

    except Exception as e:
        logger.exception("Health check falhou")
        status = {
            'status': 'unhealthy',
            'error': str(e),
            'timestamp': timezone.now().isoformat(),
        }

        return JsonResponse(status, status=500)
