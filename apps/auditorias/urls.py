# apps/auditorias/urls.py

from django.urls import path
from . import views

app_name = 'auditorias'

urlpatterns = [
    # Calendário e lista
    path('', views.calendario, name='calendario'),
    path('nova/', views.nova_auditoria, name='nova'),

    # Auditoria
    path('<int:auditoria_id>/', views.detalhe, name='detalhe'),
    path('<int:auditoria_id>/cancelar/', views.cancelar, name='cancelar'),
    path('<int:auditoria_id>/excluir/', views.excluir, name='excluir'),

    # Relatório e fotos
    path('<int:auditoria_id>/relatorio/', views.relatorio, name='relatorio'),
    path('<int:auditoria_id>/fotos/enviar/', views.enviar_fotos, name='enviar_fotos'),
    path('<int:auditoria_id>/fotos/<int:foto_id>/remover/', views.remover_foto, name='remover_foto'),
]
