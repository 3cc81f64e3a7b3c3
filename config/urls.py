# config/urls.py

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.views.generic import RedirectView

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # Aplicações principais
    path('', include('apps.core.urls')),
    path('auditorias/', include('apps.auditorias.urls')),
    path('relatorios/', include('apps.relatorios.urls')),

    # Redirecionamentos úteis
    path('', RedirectView.as_view(pattern_name='relatorios:painel', permanent=False)),
    path('painel/', RedirectView.as_view(pattern_name='relatorios:painel', permanent=False)),
    path('calendario/', RedirectView.as_view(pattern_name='auditorias:calendario', permanent=False)),
]

# Servir arquivos de mídia em desenvolvimento
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

    # Debug Toolbar se disponível
    try:
        import debug_toolbar

        urlpatterns = [
                          path('__debug__/', include(debug_toolbar.urls)),
                      ] + urlpatterns
    except ImportError:
        pass
