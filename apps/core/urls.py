# apps/core/urls.py

from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # === AUTENTICAÇÃO ===
    path('login/', views.login_view, name='login'),
    path('logout/', views.logout_view, name='logout'),
    path('registro/', views.registro_view, name='registro'),

    # === AUDITORES ===
    path('auditores/', views.auditores_lista, name='auditores'),
    path('auditores/novo/', views.auditor_criar, name='auditor_criar'),
    path('auditores/<int:usuario_id>/status/', views.auditor_alternar_status, name='auditor_status'),
    path('auditores/<int:usuario_id>/excluir/', views.auditor_excluir, name='auditor_excluir'),

    # === CLIENTES ===
    path('clientes/', views.clientes_lista, name='clientes'),
    path('clientes/novo/', views.cliente_form, name='cliente_criar'),
    path('clientes/<int:cliente_id>/editar/', views.cliente_form, name='cliente_editar'),
    path('clientes/<int:cliente_id>/excluir/', views.cliente_excluir, name='cliente_excluir'),

    # === MONITORAMENTO ===
    path('health/', views.health_check, name='health'),
]
