# apps/auditorias/forms.py

from django import forms

from apps.core.forms import CLASSE_CHECKBOX, CLASSE_INPUT
from apps.core.models import Cliente, Usuario
from .models import RelatorioAuditoria


class AuditoriaForm(forms.Form):
    """
    Agendamento de auditoria

    Só oferece auditores ativos; o limite de auditorias é conferido
    pelo serviço dentro da transação.
    """

    titulo = forms.CharField(
        label='Título',
        min_length=3,
        max_length=200,
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT})
    )

    cliente = forms.ModelChoiceField(
        label='Cliente',
        queryset=Cliente.objects.none(),
        required=False,
        empty_label='Nenhum (local livre)',
        widget=forms.Select(attrs={'class': 'form-select w-full px-4 py-2 border rounded-lg'})
    )

    local = forms.CharField(
        label='Local',
        max_length=300,
        required=False,
        help_text='Deixe em branco para usar o endereço do cliente',
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT})
    )

    data_agendada = forms.DateTimeField(
        label='Data e hora',
        input_formats=['%Y-%m-%dT%H:%M', '%d/%m/%Y %H:%M', '%Y-%m-%d %H:%M'],
        widget=forms.DateTimeInput(
            attrs={'class': CLASSE_INPUT, 'type': 'datetime-local'},
            format='%Y-%m-%dT%H:%M'
        )
    )

    auditor = forms.ModelChoiceField(
        label='Auditor',
        queryset=Usuario.objects.none(),
        empty_label='Selecione um auditor',
        widget=forms.Select(attrs={'class': 'form-select w-full px-4 py-2 border rounded-lg'})
    )

    observacoes = forms.CharField(
        label='Observações',
        required=False,
        widget=forms.Textarea(attrs={
            'class': 'form-textarea w-full px-4 py-2 border rounded-lg',
            'rows': 3
        })
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['cliente'].queryset = Cliente.objects.filter(ativo=True).order_by('nome')
        self.fields['auditor'].queryset = Usuario.objects.filter(
            tipo=Usuario.TIPO_AUDITOR, ativo=True
        ).order_by('nome')
        self.fields['auditor'].label_from_instance = (
            lambda u: f"{u} ({u.total_auditorias}/{u.limite_auditorias})"
        )

    def clean(self):
        cleaned_data = super().clean()
        local = (cleaned_data.get('local') or '').strip()
        if not local and not cleaned_data.get('cliente'):
            self.add_error('local', 'Informe o local ou selecione um cliente')
        elif local and len(local) < 3:
            self.add_error('local', 'Localização deve ter no mínimo 3 caracteres')
        return cleaned_data


class RelatorioAuditoriaForm(forms.ModelForm):
    """Formulário do relatório da visita"""

    class Meta:
        model = RelatorioAuditoria
        fields = [
            'horario_chegada', 'horario_saida', 'valor_total', 'numero_nota_fiscal',
            'consumo_entrada', 'consumo_prato_principal', 'consumo_bebida', 'consumo_sobremesa',
            'foto_atendentes', 'foto_fachada', 'foto_nota_fiscal', 'foto_banheiro',
            'observacoes', 'nao_conformidades',
        ]
        labels = {
            'horario_chegada': 'Horário de chegada',
            'horario_saida': 'Horário de saída',
            'valor_total': 'Valor total (R$)',
            'numero_nota_fiscal': 'Número da nota fiscal',
            'observacoes': 'Observações',
            'nao_conformidades': 'Não conformidades',
            **{campo: rotulo for campo, rotulo in RelatorioAuditoria.CHECKLIST_CONSUMO},
            **{campo: rotulo for campo, rotulo in RelatorioAuditoria.CHECKLIST_FOTOS},
        }
        widgets = {
            'horario_chegada': forms.TimeInput(attrs={'class': CLASSE_INPUT, 'type': 'time'}),
            'horario_saida': forms.TimeInput(attrs={'class': CLASSE_INPUT, 'type': 'time'}),
            'valor_total': forms.NumberInput(attrs={'class': CLASSE_INPUT, 'step': '0.01', 'min': 0}),
            'numero_nota_fiscal': forms.TextInput(attrs={'class': CLASSE_INPUT}),
            'observacoes': forms.Textarea(attrs={
                'class': 'form-textarea w-full px-4 py-2 border rounded-lg',
                'rows': 4
            }),
            'nao_conformidades': forms.Textarea(attrs={
                'class': 'form-textarea w-full px-4 py-2 border rounded-lg',
                'rows': 3
            }),
            **{
                campo: forms.CheckboxInput(attrs={'class': CLASSE_CHECKBOX})
                for campo, _ in RelatorioAuditoria.CHECKLIST_CONSUMO + RelatorioAuditoria.CHECKLIST_FOTOS
            },
        }

