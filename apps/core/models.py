# apps/core/models.py

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.core.validators import MinValueValidator, RegexValidator
from django.db import models


def limite_auditorias_padrao():
    return settings.AUDITORIA_LIMITE_PADRAO


class Usuario(AbstractUser):
    """
    Perfil de usuário do sistema

    Cada usuário é administrador ou auditor. O campo `ativo` é a flag de
    negócio (auditor disponível para receber auditorias) e não impede o
    login, que continua controlado por `is_active`.
    """

    TIPO_ADMIN = 'admin'
    TIPO_AUDITOR = 'auditor'

    TIPO_CHOICES = [
        (TIPO_ADMIN, 'Administrador'),
        (TIPO_AUDITOR, 'Auditor'),
    ]

    # === INFORMAÇÕES PESSOAIS ===
    email = models.EmailField('email', unique=True)
    nome = models.CharField(max_length=200, blank=True)
    telefone = models.CharField(
        max_length=20,
        blank=True,
        help_text="WhatsApp no formato (00) 00000-0000"
    )
    idade = models.PositiveSmallIntegerField(null=True, blank=True)
    cidade_residencia = models.CharField(max_length=200, blank=True)
    tipo = models.CharField(max_length=20, choices=TIPO_CHOICES, default=TIPO_AUDITOR)

    # === CONTROLE DE AUDITORIAS ===
    ativo = models.BooleanField(default=True)
    total_auditorias = models.PositiveIntegerField(
        default=0,
        help_text="Auditorias pendentes atribuídas no momento"
    )
    limite_auditorias = models.PositiveIntegerField(
        default=limite_auditorias_padrao,
        validators=[MinValueValidator(1)]
    )

    # === METADADOS ===
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'usuario'
        ordering = ['nome', 'email']
        indexes = [
            models.Index(fields=['tipo', 'ativo'], name='usuario_tipo_ativo_idx'),
        ]

    @property
    def is_admin(self):
        return self.tipo == self.TIPO_ADMIN

    @property
    def is_auditor(self):
        return self.tipo == self.TIPO_AUDITOR

    @property
    def vagas_disponiveis(self):
        return max(0, self.limite_auditorias - self.total_auditorias)

    def pode_receber_auditoria(self):
        """
        Regras para receber nova auditoria:
        1. Deve ser auditor
        2. Deve estar ativo
        3. Não pode ter atingido o limite de auditorias pendentes
        """
        return (
            self.is_auditor
            and self.ativo
            and self.total_auditorias < self.limite_auditorias
        )

    def get_auditorias_visiveis(self):
        """
        Retorna auditorias que o usuário pode ver

        Admin vê todas; auditor vê apenas as atribuídas a ele.
        """
        from apps.auditorias.models import Auditoria

        queryset = Auditoria.objects.select_related('auditor', 'cliente')
        if self.is_admin:
            return queryset
        return queryset.filter(auditor=self)

    def get_full_name(self):
        return self.nome or super().get_full_name()

    def __str__(self):
        return self.nome or self.email


class Cliente(models.Model):
    """Estabelecimento visitado pelos auditores"""

    nome = models.CharField(max_length=200)
    endereco = models.CharField(max_length=300)
    cidade = models.CharField(max_length=100)
    estado = models.CharField(
        max_length=2,
        validators=[RegexValidator(r'^[A-Z]{2}$', 'Estado deve ter 2 caracteres')]
    )
    cep = models.CharField(max_length=9, blank=True)

    # === CONTATO ===
    contato_nome = models.CharField(max_length=200, blank=True)
    contato_email = models.EmailField(blank=True)
    contato_telefone = models.CharField(max_length=20, blank=True)

    horario_funcionamento = models.CharField(max_length=200, blank=True)
    observacoes = models.TextField(blank=True)

    # === REGRAS DE VISITA ===
    ativo = models.BooleanField(default=True)
    limite_auditorias_mes = models.PositiveIntegerField(
        default=4,
        validators=[MinValueValidator(1, 'Mínimo de 1 auditoria por mês')]
    )
    requer_treinamento_especial = models.BooleanField(default=False)

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cliente'
        ordering = ['nome']

    @property
    def endereco_completo(self):
        return f"{self.endereco} - {self.cidade}, {self.estado}"

    def __str__(self):
        return f"{self.nome} ({self.cidade}/{self.estado})"
