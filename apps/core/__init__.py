# apps/core/__init__.py

"""
Core - Aplicação principal do Job Auditoria

Contém:
- Models de usuário (admin/auditor) e cliente
- Serviço de autenticação e sistema de permissões por capacidade
- Filtros de listas e mapeamento de erros para mensagens
- Gestão de auditores e clientes
"""
