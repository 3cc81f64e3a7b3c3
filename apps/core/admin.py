# apps/core/admin.py

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import Cliente, Usuario


@admin.register(Usuario)
class UsuarioAdmin(BaseUserAdmin):
    """Admin customizado para o modelo Usuario"""

    list_display = [
        'email', 'nome', 'tipo_badge', 'ativo', 'vagas',
        'is_active', 'criado_em'
    ]
    list_filter = ['tipo', 'ativo', 'is_staff', 'is_active']
    search_fields = ['email', 'nome', 'telefone', 'cidade_residencia']
    ordering = ['nome', 'email']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Perfil', {
            'fields': ('nome', 'tipo', 'telefone', 'idade', 'cidade_residencia')
        }),
        ('Auditorias', {
            'fields': ('ativo', 'total_auditorias', 'limite_auditorias')
        }),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Perfil', {
            'fields': ('email', 'nome', 'tipo', 'telefone')
        }),
    )

    def tipo_badge(self, obj):
        """Exibe o tipo de usuário com badge colorido"""
        cores = {
            'admin': '#EF4444',  # vermelho
            'auditor': '#3B82F6'  # azul
        }
        cor = cores.get(obj.tipo, '#6B7280')
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cor, obj.get_tipo_display()
        )

    tipo_badge.short_description = 'Tipo'

    def vagas(self, obj):
        if not obj.is_auditor:
            return '-'
        return f"{obj.total_auditorias}/{obj.limite_auditorias}"

    vagas.short_description = 'Auditorias'


@admin.register(Cliente)
class ClienteAdmin(admin.ModelAdmin):
    """Admin para clientes"""

    list_display = [
        'nome', 'cidade', 'estado', 'contato_nome',
        'limite_auditorias_mes', 'ativo'
    ]
    list_filter = ['ativo', 'estado', 'requer_treinamento_especial']
    search_fields = ['nome', 'cidade', 'endereco', 'contato_nome']
    readonly_fields = ['criado_em', 'atualizado_em']

    fieldsets = (
        ('Informações Básicas', {
            'fields': ('nome', 'endereco', 'cidade', 'estado', 'cep', 'ativo')
        }),
        ('Contato', {
            'fields': ('contato_nome', 'contato_email', 'contato_telefone', 'horario_funcionamento')
        }),
        ('Regras de Visita', {
            'fields': ('limite_auditorias_mes', 'requer_treinamento_especial', 'observacoes')
        }),
        ('Datas', {
            'fields': ('criado_em', 'atualizado_em'),
            'classes': ('collapse',)
        })
    )


# Configuração do site admin
admin.site.site_header = "Job Auditoria - Administração"
admin.site.site_title = "Job Auditoria"
admin.site.index_title = "Painel Administrativo"
