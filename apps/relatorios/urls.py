# apps/relatorios/urls.py

from django.urls import path
from . import views

app_name = 'relatorios'

urlpatterns = [
    # Painel principal
    path('', views.painel, name='painel'),

    # Relatório da visita
    path('auditoria/<int:auditoria_id>/pdf/', views.relatorio_pdf, name='relatorio_pdf'),

    # Exportações da lista de auditorias
    path('exportar/csv/', views.exportar_csv, name='exportar_csv'),
    path('exportar/excel/', views.exportar_excel, name='exportar_excel'),

    # API para o painel
    path('api/resumo/', views.api_resumo, name='api_resumo'),
]
