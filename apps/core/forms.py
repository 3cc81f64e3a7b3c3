# apps/core/forms.py

from django import forms
from django.core.exceptions import ValidationError

from .models import Cliente

CLASSE_INPUT = 'form-input w-full px-4 py-2 border rounded-lg'
CLASSE_CHECKBOX = 'form-checkbox h-4 w-4 text-blue-600'


class LoginForm(forms.Form):
    """Formulário de login por email"""

    email = forms.EmailField(
        label='Email',
        widget=forms.EmailInput(attrs={
            'class': CLASSE_INPUT,
            'placeholder': 'seu@email.com',
            'autofocus': True
        })
    )

    senha = forms.CharField(
        label='Senha',
        widget=forms.PasswordInput(attrs={
            'class': CLASSE_INPUT,
            'placeholder': 'Sua senha'
        })
    )

    lembrar_me = forms.BooleanField(
        label='Lembrar-me',
        required=False,
        widget=forms.CheckboxInput(attrs={'class': CLASSE_CHECKBOX})
    )


class AuditorForm(forms.Form):
    """Cadastro de auditor pelo administrador"""

    nome = forms.CharField(
        label='Nome completo',
        max_length=200,
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT})
    )

    email = forms.EmailField(
        label='Email',
        widget=forms.EmailInput(attrs={
            'class': CLASSE_INPUT,
            'placeholder': 'email@exemplo.com'
        })
    )

    telefone = forms.CharField(
        label='WhatsApp',
        max_length=20,
        required=False,
        widget=forms.TextInput(attrs={
            'class': CLASSE_INPUT,
            'placeholder': '(00) 00000-0000'
        })
    )

    senha = forms.CharField(
        label='Senha',
        min_length=6,
        widget=forms.PasswordInput(attrs={
            'class': CLASSE_INPUT,
            'placeholder': 'Mínimo 6 caracteres'
        })
    )


class RegistroAuditorForm(AuditorForm):
    """Auto-cadastro de auditor"""

    idade = forms.IntegerField(
        label='Idade',
        min_value=18,
        error_messages={'min_value': 'É necessário ter pelo menos 18 anos'},
        widget=forms.NumberInput(attrs={'class': CLASSE_INPUT})
    )

    cidade_residencia = forms.CharField(
        label='Cidade onde mora',
        max_length=200,
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT})
    )

    confirmar_senha = forms.CharField(
        label='Confirmar Senha',
        widget=forms.PasswordInput(attrs={
            'class': CLASSE_INPUT,
            'placeholder': 'Digite a senha novamente'
        })
    )

    field_order = [
        'nome', 'email', 'telefone', 'idade', 'cidade_residencia',
        'senha', 'confirmar_senha',
    ]

    def clean_confirmar_senha(self):
        """Valida se senhas coincidem"""
        senha = self.cleaned_data.get('senha')
        confirmar_senha = self.cleaned_data.get('confirmar_senha')

        if senha and confirmar_senha and senha != confirmar_senha:
            raise ValidationError("As senhas não coincidem")

        return confirmar_senha


class ClienteForm(forms.ModelForm):
    """Formulário para criar/editar clientes"""

    class Meta:
        model = Cliente
        fields = [
            'nome', 'endereco', 'cidade', 'estado', 'cep',
            'contato_nome', 'contato_email', 'contato_telefone',
            'horario_funcionamento', 'observacoes',
            'ativo', 'limite_auditorias_mes', 'requer_treinamento_especial',
        ]
        widgets = {
            'nome': forms.TextInput(attrs={'class': CLASSE_INPUT}),
            'endereco': forms.TextInput(attrs={'class': CLASSE_INPUT}),
            'cidade': forms.TextInput(attrs={'class': CLASSE_INPUT}),
            'estado': forms.TextInput(attrs={
                'class': CLASSE_INPUT,
                'maxlength': 2,
                'placeholder': 'SP'
            }),
            'cep': forms.TextInput(attrs={
                'class': CLASSE_INPUT,
                'placeholder': '00000-000'
            }),
            'contato_nome': forms.TextInput(attrs={'class': CLASSE_INPUT}),
            'contato_email': forms.EmailInput(attrs={'class': CLASSE_INPUT}),
            'contato_telefone': forms.TextInput(attrs={
                'class': CLASSE_INPUT,
                'placeholder': '(00) 00000-0000'
            }),
            'horario_funcionamento': forms.TextInput(attrs={
                'class': CLASSE_INPUT,
                'placeholder': 'Ex: Seg a Sex, 11h às 23h'
            }),
            'observacoes': forms.Textarea(attrs={
                'class': 'form-textarea w-full px-4 py-2 border rounded-lg',
                'rows': 3
            }),
            'ativo': forms.CheckboxInput(attrs={'class': CLASSE_CHECKBOX}),
            'limite_auditorias_mes': forms.NumberInput(attrs={
                'class': CLASSE_INPUT,
                'min': 1
            }),
            'requer_treinamento_especial': forms.CheckboxInput(attrs={'class': CLASSE_CHECKBOX}),
        }

    def clean_estado(self):
        """Estado sempre em maiúsculas"""
        return (self.cleaned_data.get('estado') or '').strip().upper()


class FiltroListaForm(forms.Form):
    """Busca e filtro de status das listas"""

    FILTRO_CHOICES = [
        ('all', 'Todos'),
        ('active', 'Ativos'),
        ('inactive', 'Inativos'),
    ]

    busca = forms.CharField(
        required=False,
        widget=forms.TextInput(attrs={
            'class': 'form-input px-4 py-2 border rounded-lg',
            'placeholder': 'Buscar...'
        })
    )

    filtro = forms.ChoiceField(
        choices=FILTRO_CHOICES,
        required=False,
        initial='all',
        widget=forms.Select(attrs={'class': 'form-select px-4 py-2 border rounded-lg'})
    )

    def valores(self):
        """(busca, filtro) validados; filtro inválido volta para 'all'"""
        if not self.is_valid():
            return '', 'all'
        return self.cleaned_data.get('busca') or '', self.cleaned_data.get('filtro') or 'all'


class FiltroAuditoriaForm(FiltroListaForm):
    FILTRO_CHOICES = [
        ('all', 'Todas'),
        ('pending', 'Pendentes'),
        ('resolved', 'Resolvidas'),
        ('active', 'Ativas'),
        ('inactive', 'Inativas'),
    ]

    filtro = forms.ChoiceField(
        choices=FILTRO_CHOICES,
        required=False,
        initial='all',
        widget=forms.Select(attrs={'class': 'form-select px-4 py-2 border rounded-lg'})
    )
