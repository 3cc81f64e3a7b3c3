import apps.auditorias.models
import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('core', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Auditoria',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('titulo', models.CharField(max_length=200, validators=[django.core.validators.MinLengthValidator(3, 'Título deve ter no mínimo 3 caracteres')])),
                ('data_agendada', models.DateTimeField()),
                ('local', models.CharField(help_text='Endereço livre da visita', max_length=300, validators=[django.core.validators.MinLengthValidator(3, 'Localização deve ter no mínimo 3 caracteres')])),
                ('status', models.CharField(choices=[('pending', 'Pendente'), ('completed', 'Concluída'), ('cancelled', 'Cancelada')], default='pending', max_length=20)),
                ('observacoes', models.TextField(blank=True)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
                ('auditor', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='auditorias', to=settings.AUTH_USER_MODEL)),
                ('cliente', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='auditorias', to='core.cliente')),
                ('criado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='auditorias_criadas', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'auditoria',
                'ordering': ['data_agendada'],
                'indexes': [
                    models.Index(fields=['status'], name='auditoria_status_idx'),
                    models.Index(fields=['data_agendada'], name='auditoria_data_agendada_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='FotoAuditoria',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('arquivo', models.ImageField(max_length=255, upload_to=apps.auditorias.models.caminho_foto_auditoria)),
                ('tipo', models.CharField(default='evidencia', max_length=50)),
                ('nome_original', models.CharField(blank=True, max_length=255)),
                ('tamanho', models.PositiveIntegerField(default=0)),
                ('enviado_em', models.DateTimeField(auto_now_add=True)),
                ('auditoria', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='fotos', to='auditorias.auditoria')),
            ],
            options={
                'db_table': 'foto_auditoria',
                'ordering': ['enviado_em', 'id'],
            },
        ),
        migrations.CreateModel(
            name='RelatorioAuditoria',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('horario_chegada', models.TimeField()),
                ('horario_saida', models.TimeField()),
                ('valor_total', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('numero_nota_fiscal', models.CharField(max_length=100)),
                ('consumo_entrada', models.BooleanField(default=False)),
                ('consumo_prato_principal', models.BooleanField(default=False)),
                ('consumo_bebida', models.BooleanField(default=False)),
                ('consumo_sobremesa', models.BooleanField(default=False)),
                ('foto_atendentes', models.BooleanField(default=False)),
                ('foto_fachada', models.BooleanField(default=False)),
                ('foto_nota_fiscal', models.BooleanField(default=False)),
                ('foto_banheiro', models.BooleanField(default=False)),
                ('observacoes', models.TextField()),
                ('nao_conformidades', models.TextField(blank=True)),
                ('enviado_em', models.DateTimeField(auto_now_add=True)),
                ('auditoria', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='relatorio', to='auditorias.auditoria')),
                ('enviado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='relatorios_enviados', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'relatorio_auditoria',
                'ordering': ['-enviado_em'],
            },
        ),
    ]
