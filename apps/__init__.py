# apps/__init__.py

"""
Job Auditoria - Aplicações Django

Este pacote contém todas as aplicações do sistema:
- core: Usuários, clientes, autenticação e permissões
- auditorias: Agendamento, fotos, relatórios de visita e calendário
- relatorios: Painel, exportações PDF, CSV e Excel
"""

__version__ = '0.1.0'
