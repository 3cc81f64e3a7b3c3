import apps.core.models
import django.contrib.auth.models
import django.contrib.auth.validators
import django.core.validators
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='Cliente',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome', models.CharField(max_length=200)),
                ('endereco', models.CharField(max_length=300)),
                ('cidade', models.CharField(max_length=100)),
                ('estado', models.CharField(max_length=2, validators=[django.core.validators.RegexValidator('^[A-Z]{2}$', 'Estado deve ter 2 caracteres')])),
                ('cep', models.CharField(blank=True, max_length=9)),
                ('contato_nome', models.CharField(blank=True, max_length=200)),
                ('contato_email', models.EmailField(blank=True, max_length=254)),
                ('contato_telefone', models.CharField(blank=True, max_length=20)),
                ('horario_funcionamento', models.CharField(blank=True, max_length=200)),
                ('observacoes', models.TextField(blank=True)),
                ('ativo', models.BooleanField(default=True)),
                ('limite_auditorias_mes', models.PositiveIntegerField(default=4, validators=[django.core.validators.MinValueValidator(1, 'Mínimo de 1 auditoria por mês')])),
                ('requer_treinamento_especial', models.BooleanField(default=False)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'cliente',
                'ordering': ['nome'],
            },
        ),
        migrations.CreateModel(
            name='Usuario',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('username', models.CharField(error_messages={'unique': 'A user with that username already exists.'}, help_text='Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.', max_length=150, unique=True, validators=[django.contrib.auth.validators.UnicodeUsernameValidator()], verbose_name='username')),
                ('first_name', models.CharField(blank=True, max_length=150, verbose_name='first name')),
                ('last_name', models.CharField(blank=True, max_length=150, verbose_name='last name')),
                ('is_staff', models.BooleanField(default=False, help_text='Designates whether the user can log into this admin site.', verbose_name='staff status')),
                ('is_active', models.BooleanField(default=True, help_text='Designates whether this user should be treated as active. Unselect this instead of deleting accounts.', verbose_name='active')),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
                ('email', models.EmailField(max_length=254, unique=True, verbose_name='email')),
                ('nome', models.CharField(blank=True, max_length=200)),
                ('telefone', models.CharField(blank=True, help_text='WhatsApp no formato (00) 00000-0000', max_length=20)),
                ('idade', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('cidade_residencia', models.CharField(blank=True, max_length=200)),
                ('tipo', models.CharField(choices=[('admin', 'Administrador'), ('auditor', 'Auditor')], default='auditor', max_length=20)),
                ('ativo', models.BooleanField(default=True)),
                ('total_auditorias', models.PositiveIntegerField(default=0, help_text='Auditorias pendentes atribuídas no momento')),
                ('limite_auditorias', models.PositiveIntegerField(default=apps.core.models.limite_auditorias_padrao, validators=[django.core.validators.MinValueValidator(1)])),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'db_table': 'usuario',
                'ordering': ['nome', 'email'],
                'indexes': [models.Index(fields=['tipo', 'ativo'], name='usuario_tipo_ativo_idx')],
            },
            managers=[
                ('objects', django.contrib.auth.models.UserManager()),
            ],
        ),
    ]
