# config/asgi.py

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

# Apenas HTTP; o sistema não mantém conexões em tempo real
application = get_asgi_application()
