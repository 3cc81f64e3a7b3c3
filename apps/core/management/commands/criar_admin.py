# apps/core/management/commands/criar_admin.py

from django.core.management.base import BaseCommand, CommandError

from apps.core.models import Usuario


class Command(BaseCommand):
    help = 'Cria (ou promove) o usuário administrador do sistema'

    def add_arguments(self, parser):
        parser.add_argument('--email', required=True, help='Email de login do administrador')
        parser.add_argument('--senha', required=True, help='Senha inicial (mínimo 6 caracteres)')
        parser.add_argument('--nome', default='Administrador', help='Nome exibido')

    def handle(self, *args, **options):
        """
        Cria o primeiro administrador

        Se o email já existir, o usuário é promovido a admin e tem a senha
        redefinida.
        """
        email = options['email'].strip().lower()
        senha = options['senha']

        if len(senha) < 6:
            raise CommandError('A senha deve ter pelo menos 6 caracteres')

        usuario, criado = Usuario.objects.get_or_create(
            email=email,
            defaults={'username': email, 'nome': options['nome']}
        )

        usuario.tipo = Usuario.TIPO_ADMIN
        usuario.ativo = True
        usuario.is_active = True
        usuario.is_staff = True
        usuario.is_superuser = True
        usuario.set_password(senha)
        usuario.save()

        if criado:
            self.stdout.write(self.style.SUCCESS(f'✅ Administrador {email} criado'))
        else:
            self.stdout.write(self.style.WARNING(f'⚠️  Usuário {email} promovido a administrador'))
