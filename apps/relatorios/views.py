# apps/relatorios/views.py

import csv
import logging
from io import BytesIO

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ObjectDoesNotExist
from django.http import HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.utils.html import escape

# Imports para PDF
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

# Imports para Excel
import xlsxwriter

from apps.core.filtros import filtrar_auditorias
from apps.core.forms import FiltroAuditoriaForm
from apps.core.permissions import requer_acesso_auditoria, requer_capacidade
from apps.core.utils import emoji_status, formatar_data_extenso, formatar_moeda
from .utils import (
    CABECALHO_EXPORTACAO,
    calcular_resumo_auditorias,
    celula_segura,
    gerar_linhas_exportacao,
    resumo_para_json,
)

logger = logging.getLogger(__name__)

ESTILO_TABELA = [
    ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
    ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
    ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
    ('FONTSIZE', (0, 0), (-1, 0), 12),
    ('BOTTOMPADDING', (0, 0), (-1, 0), 12),
    ('GRID', (0, 0), (-1, -1), 1, colors.black)
]


def _auditorias_filtradas(request):
    """Auditorias visíveis ao usuário com a busca/filtro da querystring"""
    busca, filtro = FiltroAuditoriaForm(request.GET).valores()
    auditorias = request.user.get_auditorias_visiveis().select_related('relatorio')
    return filtrar_auditorias(auditorias, busca, filtro)


@login_required
def painel(request):
    """
    Painel principal com o resumo das auditorias

    Admin vê os números de todas as auditorias, auditor apenas das suas.
    """
    auditorias = request.user.get_auditorias_visiveis()
    resumo = calcular_resumo_auditorias(auditorias)

    context = {
        'title': 'Painel',
        'resumo': resumo,
    }

    return render(request, 'relatorios/painel.html', context)


@login_required
def api_resumo(request):
    """
    API JSON com o resumo do painel
    Usado para atualizar os cards via HTMX/JS
    """
    resumo = calcular_resumo_auditorias(request.user.get_auditorias_visiveis())

    return JsonResponse({
        'success': True,
        'resumo': resumo_para_json(resumo),
        'timestamp': timezone.now().isoformat()
    })


@login_required
@requer_acesso_auditoria
def relatorio_pdf(request, auditoria_id):
    """
    Gera o relatório da visita em PDF
    """
    auditoria = request.auditoria  # Injetado pelo decorator

    try:
        relatorio = auditoria.relatorio
    except ObjectDoesNotExist:
        messages.error(request, 'Esta auditoria ainda não possui relatório.')
        return redirect('auditorias:detalhe', auditoria_id=auditoria_id)

    response = HttpResponse(content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="relatorio_auditoria_{auditoria.pk}.pdf"'

    doc = SimpleDocTemplate(response, pagesize=A4)
    story = []

    # Estilos
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        'CustomTitle',
        parent=styles['Heading1'],
        fontSize=20,
        spaceAfter=30,
        textColor=colors.darkblue
    )

    heading_style = ParagraphStyle(
        'CustomHeading',
        parent=styles['Heading2'],
        fontSize=14,
        spaceAfter=12,
        textColor=colors.darkblue
    )

    story.append(Paragraph(f"Relatório de Auditoria: {escape(auditoria.titulo)}", title_style))
    story.append(Paragraph(f"Local: {escape(auditoria.local)}", styles['Normal']))
    story.append(Paragraph(f"Gerado em: {formatar_data_extenso(timezone.now())}", styles['Normal']))
    story.append(Spacer(1, 20))

    # Informações da visita
    story.append(Paragraph("Informações da Visita", heading_style))

    info_data = [
        ['Campo', 'Valor'],
        ['Data agendada', formatar_data_extenso(auditoria.data_agendada)],
        ['Auditor', str(auditoria.auditor)],
        ['Status', f"{emoji_status(auditoria.status)} {auditoria.get_status_display()}"],
        ['Chegada', relatorio.horario_chegada.strftime('%H:%M')],
        ['Saída', relatorio.horario_saida.strftime('%H:%M')],
        ['Valor total', formatar_moeda(relatorio.valor_total)],
        ['Nota fiscal', relatorio.numero_nota_fiscal],
    ]

    info_table = Table(info_data)
    info_table.setStyle(TableStyle(ESTILO_TABELA + [
        ('BACKGROUND', (0, 0), (-1, 0), colors.grey),
        ('BACKGROUND', (0, 1), (-1, -1), colors.beige),
    ]))

    story.append(info_table)
    story.append(Spacer(1, 20))

    # Checklist
    story.append(Paragraph("Checklist", heading_style))

    checklist_data = [['Item', 'Realizado']]
    for rotulo, marcado in relatorio.itens_consumo + relatorio.itens_fotos:
        checklist_data.append([rotulo, 'Sim' if marcado else 'Não'])

    checklist_table = Table(checklist_data)
    checklist_table.setStyle(TableStyle(ESTILO_TABELA + [
        ('BACKGROUND', (0, 0), (-1, 0), colors.green),
        ('BACKGROUND', (0, 1), (-1, -1), colors.lightgreen),
    ]))

    story.append(checklist_table)
    story.append(Spacer(1, 20))

    story.append(Paragraph("Observações", heading_style))
    story.append(Paragraph(escape(relatorio.observacoes), styles['Normal']))

    if relatorio.nao_conformidades:
        story.append(Spacer(1, 12))
        story.append(Paragraph("Não Conformidades", heading_style))
        story.append(Paragraph(escape(relatorio.nao_conformidades), styles['Normal']))

    # Fotos
    fotos = list(auditoria.fotos.all())
    if fotos:
        story.append(Spacer(1, 20))
        story.append(Paragraph("Fotos", heading_style))
        for foto in fotos:
            try:
                with foto.arquivo.open('rb') as arquivo:
                    conteudo = BytesIO(arquivo.read())
                story.append(Image(conteudo, width=240, height=180, kind='proportional'))
                story.append(Spacer(1, 8))
            except OSError:
                logger.warning(f"Foto {foto.pk} indisponível para o PDF da auditoria {auditoria.pk}")
                story.append(Paragraph(f"Foto indisponível: {foto.nome_original}", styles['Normal']))

    # Rodapé
    story.append(Spacer(1, 30))
    story.append(Paragraph("Relatório gerado pelo Job Auditoria", styles['Normal']))

    doc.build(story)
    return response


@login_required
@requer_capacidade('exportar_relatorios', 'Acesso restrito a administradores.')
def exportar_csv(request):
    """
    Exporta a lista de auditorias (com busca/filtro) para CSV
    """
    response = HttpResponse(content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = 'attachment; filename="auditorias.csv"'
    response.write('\ufeff')  # BOM para UTF-8

    writer = csv.writer(response)
    writer.writerow(CABECALHO_EXPORTACAO)
    writer.writerows(gerar_linhas_exportacao(_auditorias_filtradas(request)))

    return response


@login_required
@requer_capacidade('exportar_relatorios', 'Acesso restrito a administradores.')
def exportar_excel(request):
    """
    Exporta a lista de auditorias para Excel (XLSX)
    Aba de resumo com os números do painel e aba com as auditorias
    """
    auditorias = _auditorias_filtradas(request)
    resumo = calcular_resumo_auditorias(auditorias)

    # Criar arquivo Excel em memória
    output = BytesIO()
    workbook = xlsxwriter.Workbook(output, {'in_memory': True})

    # Formatos
    header_format = workbook.add_format({
        'bold': True,
        'font_color': 'white',
        'bg_color': '#366092',
        'border': 1
    })
    cell_format = workbook.add_format({'border': 1})

    # Aba 1: Resumo
    resumo_sheet = workbook.add_worksheet('Resumo')
    resumo_sheet.write('A1', 'RESUMO DAS AUDITORIAS', header_format)
    linhas_resumo = [
        ('Total', resumo['total']),
        ('Pendentes', resumo['pendentes']),
        ('Concluídas', resumo['concluidas']),
        ('Canceladas', resumo['canceladas']),
        ('Este mês', resumo['este_mes']),
        ('Próximo mês', resumo['proximo_mes']),
    ]
    for row, (rotulo, valor) in enumerate(linhas_resumo, 2):
        resumo_sheet.write(row, 0, rotulo, header_format)
        resumo_sheet.write(row, 1, valor, cell_format)

    row = len(linhas_resumo) + 3
    resumo_sheet.write(row, 0, 'LOCAIS MAIS VISITADOS', header_format)
    for offset, item in enumerate(resumo['top_locais'], 1):
        resumo_sheet.write_string(row + offset, 0, celula_segura(item['local']), cell_format)
        resumo_sheet.write(row + offset, 1, item['total'], cell_format)

    # Aba 2: Auditorias
    auditorias_sheet = workbook.add_worksheet('Auditorias')
    for col, header in enumerate(CABECALHO_EXPORTACAO):
        auditorias_sheet.write(0, col, header, header_format)

    for row, linha in enumerate(gerar_linhas_exportacao(auditorias), 1):
        for col, valor in enumerate(linha):
            # write() trataria texto com '=' como fórmula
            if isinstance(valor, str):
                auditorias_sheet.write_string(row, col, valor, cell_format)
            else:
                auditorias_sheet.write(row, col, valor, cell_format)

    # Ajustar largura das colunas
    resumo_sheet.set_column('A:B', 25)
    auditorias_sheet.set_column('A:I', 18)

    workbook.close()
    output.seek(0)

    response = HttpResponse(
        output.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = 'attachment; filename="auditorias.xlsx"'

    return response
