# apps/auditorias/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from apps.core.erros import registrar_erro
from apps.core.filtros import filtrar_auditorias
from apps.core.forms import FiltroAuditoriaForm
from apps.core.permissions import AuditoriaPermissions, requer_acesso_auditoria, requer_capacidade
from .calendario import mes_referencia, montar_calendario
from .forms import AuditoriaForm, RelatorioAuditoriaForm
from .services import auditoria_service

logger = logging.getLogger(__name__)


@login_required
def calendario(request):
    """
    Calendário mensal e lista das auditorias visíveis ao usuário

    ?mes=AAAA-MM escolhe o mês; busca e filtro valem para a lista.
    """
    auditorias = list(auditoria_service.listar_auditorias(request.user))
    busca, filtro = FiltroAuditoriaForm(request.GET).valores()
    mes = mes_referencia(request.GET.get('mes'))

    context = {
        'title': 'Auditorias',
        'calendario': montar_calendario(auditorias, mes),
        'auditorias': filtrar_auditorias(auditorias, busca, filtro),
        'filtro_form': FiltroAuditoriaForm(initial={'busca': busca, 'filtro': filtro}),
    }

    if request.htmx:
        alvo = request.htmx.target
        if alvo == 'lista-auditorias':
            return render(request, 'auditorias/partials/lista.html', context)
        return render(request, 'auditorias/partials/calendario.html', context)
    return render(request, 'auditorias/calendario.html', context)


@login_required
@requer_capacidade('criar_auditoria', 'Apenas administradores podem criar auditorias.')
@require_http_methods(['GET', 'POST'])
def nova_auditoria(request):
    form = AuditoriaForm(request.POST or None)

    if request.method == 'POST' and form.is_valid():
        try:
            auditoria = auditoria_service.criar_auditoria(request.user, form.cleaned_data)
            messages.success(request, 'Auditoria criada com sucesso')
            return redirect('auditorias:detalhe', auditoria_id=auditoria.pk)
        except ValidationError as e:
            form.add_error(None, e)
            registrar_erro(e, 'criar auditoria')
        except Exception as e:
            messages.error(request, registrar_erro(e, 'criar auditoria'))

    return render(request, 'auditorias/form.html', {
        'title': 'Nova Auditoria',
        'form': form,
    })


@login_required
@requer_acesso_auditoria
def detalhe(request, auditoria_id):
    auditoria = request.auditoria  # Injetado pelo decorator

    try:
        relatorio = auditoria.relatorio
    except ObjectDoesNotExist:
        relatorio = None

    context = {
        'title': auditoria.titulo,
        'auditoria': auditoria,
        'relatorio': relatorio,
        'fotos': auditoria.fotos.all(),
        'pode_enviar_relatorio': (
            relatorio is None
            and auditoria.esta_pendente
            and AuditoriaPermissions.pode_enviar_relatorio(request.user, auditoria)
        ),
    }

    return render(request, 'auditorias/detalhe.html', context)


@login_required
@require_POST
def cancelar(request, auditoria_id):
    try:
        auditoria_service.cancelar_auditoria(request.user, auditoria_id)
        messages.success(request, 'Auditoria cancelada')
    except Exception as e:
        messages.error(request, registrar_erro(e, 'cancelar auditoria'))

    return redirect('auditorias:detalhe', auditoria_id=auditoria_id)


@login_required
@require_POST
def excluir(request, auditoria_id):
    try:
        auditoria_service.excluir_auditoria(request.user, auditoria_id)
    except Exception as e:
        messages.error(request, registrar_erro(e, 'excluir auditoria'))
        return redirect('auditorias:detalhe', auditoria_id=auditoria_id)

    messages.success(request, 'Auditoria excluída com sucesso')
    return redirect('auditorias:calendario')


@login_required
@requer_acesso_auditoria
@require_http_methods(['GET', 'POST'])
def relatorio(request, auditoria_id):
    """
    Formulário do relatório com as fotos já enviadas

    O envio só é aceito com todas as fotos obrigatórias no lugar.
    """
    auditoria = request.auditoria
    form = RelatorioAuditoriaForm(request.POST or None)

    if request.method == 'POST' and form.is_valid():
        try:
            auditoria_service.enviar_relatorio(request.user, auditoria_id, form.cleaned_data)
            messages.success(request, 'Relatório enviado com sucesso')
            return redirect('auditorias:detalhe', auditoria_id=auditoria_id)
        except Exception as e:
            messages.error(request, registrar_erro(e, 'enviar relatório'))

    return render(request, 'auditorias/relatorio.html', {
        'title': f'Relatório - {auditoria.titulo}',
        'auditoria': auditoria,
        'form': form,
        'fotos': auditoria.fotos.all(),
    })


@login_required
@requer_acesso_auditoria
@require_POST
def enviar_fotos(request, auditoria_id):
    auditoria = request.auditoria

    try:
        enviadas, rejeitadas = auditoria_service.enviar_fotos(
            request.user,
            auditoria_id,
            request.FILES.getlist('fotos'),
            request.POST.get('tipo') or 'evidencia'
        )
        if enviadas:
            messages.success(request, f'{len(enviadas)} foto(s) enviada(s)')
        for mensagem in rejeitadas:
            messages.warning(request, mensagem)
    except Exception as e:
        messages.error(request, registrar_erro(e, 'enviar fotos'))

    if request.htmx:
        return render(request, 'auditorias/partials/fotos.html', {
            'auditoria': auditoria,
            'fotos': auditoria.fotos.all(),
        })
    return redirect('auditorias:relatorio', auditoria_id=auditoria_id)


@login_required
@requer_acesso_auditoria
@require_POST
def remover_foto(request, auditoria_id, foto_id):
    auditoria = request.auditoria

    try:
        if not auditoria.fotos.filter(pk=foto_id).exists():
            raise ObjectDoesNotExist(foto_id)
        auditoria_service.remover_foto(request.user, foto_id)
        messages.success(request, 'Foto removida')
    except Exception as e:
        messages.error(request, registrar_erro(e, 'remover foto'))

    if request.htmx:
        return render(request, 'auditorias/partials/fotos.html', {
            'auditoria': auditoria,
            'fotos': auditoria.fotos.all(),
        })
    return redirect('auditorias:relatorio', auditoria_id=auditoria_id)
