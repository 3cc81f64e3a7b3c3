# apps/auditorias/models.py

import uuid
from pathlib import PurePosixPath

from django.conf import settings
from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models

from apps.core.models import Cliente


def caminho_fotos_auditoria(auditoria_id) -> str:
    """Prefixo no storage onde ficam as fotos de uma auditoria"""
    return f"{settings.AUDITORIA_FOTOS_PREFIXO}/{auditoria_id}"


def caminho_foto_auditoria(instance, filename):
    """
    Gera caminho único para a foto: <prefixo>/<auditoria_id>/<hex>.<ext>

    O nome enviado pelo usuário é descartado, apenas a extensão é mantida.
    """
    extensao = PurePosixPath(filename).suffix.lower().lstrip('.') or 'jpg'
    return f"{caminho_fotos_auditoria(instance.auditoria_id)}/{uuid.uuid4().hex}.{extensao}"


class Auditoria(models.Model):
    """Visita agendada de um auditor a um local"""

    STATUS_PENDENTE = 'pending'
    STATUS_CONCLUIDA = 'completed'
    STATUS_CANCELADA = 'cancelled'

    STATUS_CHOICES = [
        (STATUS_PENDENTE, 'Pendente'),
        (STATUS_CONCLUIDA, 'Concluída'),
        (STATUS_CANCELADA, 'Cancelada'),
    ]

    titulo = models.CharField(
        max_length=200,
        validators=[MinLengthValidator(3, 'Título deve ter no mínimo 3 caracteres')]
    )
    data_agendada = models.DateTimeField()
    local = models.CharField(
        max_length=300,
        validators=[MinLengthValidator(3, 'Localização deve ter no mínimo 3 caracteres')],
        help_text="Endereço livre da visita"
    )
    cliente = models.ForeignKey(
        Cliente,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='auditorias'
    )
    auditor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='auditorias'
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_PENDENTE
    )
    observacoes = models.TextField(blank=True)
    criado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='auditorias_criadas'
    )
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'auditoria'
        ordering = ['data_agendada']
        indexes = [
            models.Index(fields=['status'], name='auditoria_status_idx'),
            models.Index(fields=['data_agendada'], name='auditoria_data_agendada_idx'),
        ]

    def __str__(self):
        return f"{self.titulo} - {self.local}"

    @property
    def esta_pendente(self):
        return self.status == self.STATUS_PENDENTE

    @property
    def caminho_fotos(self):
        return caminho_fotos_auditoria(self.pk)

    def tem_relatorio(self):
        return RelatorioAuditoria.objects.filter(auditoria_id=self.pk).exists()


class RelatorioAuditoria(models.Model):
    """Relatório da visita - no máximo um por auditoria"""

    auditoria = models.OneToOneField(
        Auditoria,
        on_delete=models.CASCADE,
        related_name='relatorio'
    )

    # === INFORMAÇÕES DA VISITA ===
    horario_chegada = models.TimeField()
    horario_saida = models.TimeField()
    valor_total = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)]
    )
    numero_nota_fiscal = models.CharField(max_length=100)

    # === CHECKLIST DE CONSUMO ===
    consumo_entrada = models.BooleanField(default=False)
    consumo_prato_principal = models.BooleanField(default=False)
    consumo_bebida = models.BooleanField(default=False)
    consumo_sobremesa = models.BooleanField(default=False)

    # === CHECKLIST DE FOTOS ===
    foto_atendentes = models.BooleanField(default=False)
    foto_fachada = models.BooleanField(default=False)
    foto_nota_fiscal = models.BooleanField(default=False)
    foto_banheiro = models.BooleanField(default=False)

    observacoes = models.TextField()
    nao_conformidades = models.TextField(blank=True)

    enviado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='relatorios_enviados'
    )
    enviado_em = models.DateTimeField(auto_now_add=True)

    CHECKLIST_CONSUMO = [
        ('consumo_entrada', 'Entrada'),
        ('consumo_prato_principal', 'Prato Principal ou Porção'),
        ('consumo_bebida', 'Bebida (refrigerante/suco/água)'),
        ('consumo_sobremesa', 'Sobremesa'),
    ]

    CHECKLIST_FOTOS = [
        ('foto_atendentes', 'Foto de Todos os Atendentes'),
        ('foto_fachada', 'Fachada'),
        ('foto_nota_fiscal', 'Nota Fiscal'),
        ('foto_banheiro', 'Banheiro'),
    ]

    class Meta:
        db_table = 'relatorio_auditoria'
        ordering = ['-enviado_em']

    def __str__(self):
        return f"Relatório de {self.auditoria.titulo}"

    @property
    def itens_consumo(self):
        """Lista (rótulo, marcado) do checklist de consumo"""
        return [(rotulo, getattr(self, campo)) for campo, rotulo in self.CHECKLIST_CONSUMO]

    @property
    def itens_fotos(self):
        return [(rotulo, getattr(self, campo)) for campo, rotulo in self.CHECKLIST_FOTOS]

    @property
    def fotos(self):
        return self.auditoria.fotos.all()


class FotoAuditoria(models.Model):
    """Evidência fotográfica enviada para uma auditoria"""

    TIPO_EVIDENCIA = 'evidencia'

    auditoria = models.ForeignKey(
        Auditoria,
        on_delete=models.CASCADE,
        related_name='fotos'
    )
    arquivo = models.ImageField(upload_to=caminho_foto_auditoria, max_length=255)
    tipo = models.CharField(max_length=50, default=TIPO_EVIDENCIA)
    nome_original = models.CharField(max_length=255, blank=True)
    tamanho = models.PositiveIntegerField(default=0)
    enviado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'foto_auditoria'
        ordering = ['enviado_em', 'id']

    def __str__(self):
        return f"Foto {self.nome_original or self.arquivo.name} ({self.auditoria_id})"

    @property
    def url(self):
        return self.arquivo.url
