# apps/relatorios/__init__.py
