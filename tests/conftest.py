"""
Fixtures compartilhadas dos testes do Job Auditoria.
"""
from datetime import datetime, time
from io import BytesIO

import pytest
from PIL import Image
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone

from apps.auditorias.models import FotoAuditoria
from apps.core.models import Cliente, Usuario


@pytest.fixture(autouse=True)
def media_tmp(settings, tmp_path):
    """Cada teste grava fotos em um diretório próprio"""
    settings.MEDIA_ROOT = str(tmp_path / 'media')
    return tmp_path / 'media'


def data_local(ano, mes, dia, hora=10, minuto=0):
    return timezone.make_aware(datetime(ano, mes, dia, hora, minuto))


def criar_usuario(email, tipo=Usuario.TIPO_AUDITOR, senha='senha123', **extra):
    return Usuario.objects.create_user(
        username=email,
        email=email,
        password=senha,
        nome=extra.pop('nome', email.split('@')[0].title()),
        tipo=tipo,
        **extra
    )


def gerar_png(nome='foto.png', cor='red'):
    buffer = BytesIO()
    Image.new('RGB', (8, 8), cor).save(buffer, format='PNG')
    return SimpleUploadedFile(nome, buffer.getvalue(), content_type='image/png')


@pytest.fixture
def admin(db):
    return criar_usuario('admin@auditoria.com', tipo=Usuario.TIPO_ADMIN, nome='Administrador')


@pytest.fixture
def auditor(db):
    return criar_usuario('ana@auditoria.com', nome='Ana Souza', telefone='(11) 98765-4321')


@pytest.fixture
def outro_auditor(db):
    return criar_usuario('bruno@auditoria.com', nome='Bruno Lima')


@pytest.fixture
def cliente(db):
    return Cliente.objects.create(
        nome='Restaurante Sabor',
        endereco='Rua das Flores, 100',
        cidade='São Paulo',
        estado='SP',
    )


@pytest.fixture
def dados_auditoria(auditor):
    return {
        'titulo': 'Visita Sabor',
        'local': 'Rua das Flores, 100',
        'data_agendada': data_local(2024, 3, 15),
        'auditor': auditor,
        'observacoes': '',
    }


@pytest.fixture
def auditoria(admin, dados_auditoria):
    from apps.auditorias.services import auditoria_service
    return auditoria_service.criar_auditoria(admin, dados_auditoria)


@pytest.fixture
def imagem_png():
    return gerar_png


@pytest.fixture
def auditoria_com_fotos(auditoria):
    for indice in range(4):
        foto = FotoAuditoria(auditoria=auditoria, nome_original=f'foto{indice}.png')
        foto.arquivo.save(f'foto{indice}.png', gerar_png(f'foto{indice}.png'), save=False)
        foto.save()
    return auditoria


@pytest.fixture
def dados_relatorio():
    return {
        'horario_chegada': time(12, 0),
        'horario_saida': time(13, 30),
        'valor_total': '89.90',
        'numero_nota_fiscal': 'NF-123',
        'observacoes': 'Atendimento cordial',
        'consumo_entrada': True,
        'consumo_bebida': True,
        'foto_fachada': True,
    }


@pytest.fixture
def cliente_admin(client, admin):
    client.force_login(admin)
    return client


@pytest.fixture
def cliente_auditor(client, auditor):
    client.force_login(auditor)
    return client
