# apps/auditorias/__init__.py

"""
Auditorias - ciclo de vida das visitas

Contém:
- Models Auditoria, RelatorioAuditoria e FotoAuditoria
- Serviço com as regras de atribuição, envio de relatório e exclusão
- Montagem da grade do calendário mensal
"""
