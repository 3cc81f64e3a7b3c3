# apps/core/management/commands/limpar_fotos_orfas.py

from django.core.management.base import BaseCommand

from apps.auditorias.services import limpar_prefixo_fotos, prefixos_orfaos


class Command(BaseCommand):
    help = 'Remove do storage as fotos de auditorias que já foram excluídas'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Apenas lista os prefixos órfãos, sem apagar nada'
        )

    def handle(self, *args, **options):
        self.stdout.write('🔍 Procurando fotos órfãs...')

        orfaos = prefixos_orfaos()

        if not orfaos:
            self.stdout.write(self.style.SUCCESS('✅ Nenhuma foto órfã encontrada'))
            return

        total = 0
        for prefixo in orfaos:
            if options['dry_run']:
                self.stdout.write(f'  • {prefixo}')
                continue
            total += limpar_prefixo_fotos(prefixo)

        if options['dry_run']:
            self.stdout.write(self.style.WARNING(f'⚠️  {len(orfaos)} prefixo(s) órfão(s) encontrados'))
        else:
            self.stdout.write(
                self.style.SUCCESS(f'✅ {total} arquivo(s) removido(s) de {len(orfaos)} prefixo(s)')
            )
