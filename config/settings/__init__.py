# config/settings/__init__.py
