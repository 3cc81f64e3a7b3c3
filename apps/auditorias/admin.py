# apps/auditorias/admin.py

from django.contrib import admin
from django.utils.html import format_html

from apps.core.utils import emoji_status, formatar_moeda
from .models import Auditoria, FotoAuditoria, RelatorioAuditoria


class FotoAuditoriaInline(admin.TabularInline):
    """Fotos da auditoria - somente leitura"""
    model = FotoAuditoria
    extra = 0
    fields = ['arquivo', 'tipo', 'nome_original', 'tamanho', 'enviado_em']
    readonly_fields = ['enviado_em']

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Auditoria)
class AuditoriaAdmin(admin.ModelAdmin):
    list_display = [
        'titulo', 'local', 'data_agendada', 'auditor',
        'status_badge', 'criado_em'
    ]
    list_filter = ['status', 'data_agendada', 'auditor']
    search_fields = ['titulo', 'local', 'auditor__nome', 'auditor__email']
    date_hierarchy = 'data_agendada'
    readonly_fields = ['criado_por', 'criado_em', 'atualizado_em']
    inlines = [FotoAuditoriaInline]

    def status_badge(self, obj):
        return f"{emoji_status(obj.status)} {obj.get_status_display()}"

    status_badge.short_description = 'Status'


@admin.register(RelatorioAuditoria)
class RelatorioAuditoriaAdmin(admin.ModelAdmin):
    list_display = ['auditoria', 'valor', 'numero_nota_fiscal', 'enviado_por', 'enviado_em']
    search_fields = ['auditoria__titulo', 'numero_nota_fiscal', 'observacoes']
    date_hierarchy = 'enviado_em'
    readonly_fields = ['enviado_por', 'enviado_em']

    def valor(self, obj):
        return formatar_moeda(obj.valor_total)

    valor.short_description = 'Valor Total'


@admin.register(FotoAuditoria)
class FotoAuditoriaAdmin(admin.ModelAdmin):
    list_display = ['id', 'auditoria', 'tipo', 'preview', 'tamanho', 'enviado_em']
    list_filter = ['tipo', 'enviado_em']
    search_fields = ['auditoria__titulo', 'nome_original']

    def preview(self, obj):
        """Miniatura da foto"""
        if not obj.arquivo:
            return '-'
        return format_html(
            '<img src="{}" style="height: 40px; border-radius: 3px;">',
            obj.url
        )

    preview.short_description = 'Foto'
