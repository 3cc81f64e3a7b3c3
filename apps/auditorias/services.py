# apps/auditorias/services.py

"""
Serviço de Auditorias - regras do ciclo de vida da auditoria

Toda operação recebe explicitamente o usuário que está agindo e levanta:
- PermissionDenied quando o usuário não pode executar a ação
- ValidationError (com `code`) quando uma regra de negócio é violada
- Auditoria.DoesNotExist / FotoAuditoria.DoesNotExist para ids inexistentes

Operações que precisam ser consistentes rodam em uma única transação com
lock nas linhas da auditoria e do auditor.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Tuple

from PIL import Image, UnidentifiedImageError
from django.conf import settings
from django.core.exceptions import PermissionDenied, ValidationError
from django.core.files.storage import default_storage
from django.db import transaction
from django.utils import timezone

from apps.core.models import Cliente, Usuario
from apps.core.permissions import AuditoriaPermissions, exigir_capacidade
from .models import Auditoria, FotoAuditoria, RelatorioAuditoria, caminho_fotos_auditoria

logger = logging.getLogger(__name__)


CAMPOS_OBRIGATORIOS_RELATORIO = {
    'horario_chegada': 'Horário de chegada',
    'horario_saida': 'Horário de saída',
    'valor_total': 'Valor total',
    'numero_nota_fiscal': 'Número da nota fiscal',
    'observacoes': 'Observações',
}

CAMPOS_CHECKLIST = [
    campo for campo, _ in RelatorioAuditoria.CHECKLIST_CONSUMO + RelatorioAuditoria.CHECKLIST_FOTOS
]


class AuditoriaService:
    """Operações de escrita sobre auditorias, fotos e relatórios"""

    # =================== CONSULTAS ===================

    def listar_auditorias(self, usuario):
        """Auditorias visíveis para o usuário (admin vê todas)"""
        return usuario.get_auditorias_visiveis()

    def obter_auditoria(self, usuario, auditoria_id) -> Auditoria:
        auditoria = Auditoria.objects.select_related('auditor', 'cliente').get(pk=auditoria_id)
        if not AuditoriaPermissions.pode_ver_auditoria(usuario, auditoria):
            raise PermissionDenied("Você não tem acesso a esta auditoria")
        return auditoria

    # =================== CRIAÇÃO ===================

    def criar_auditoria(self, usuario, dados: Dict) -> Auditoria:
        """
        Cria auditoria pendente e ocupa uma vaga do auditor

        Args:
            usuario: administrador que está criando
            dados: titulo, local, data_agendada, auditor, cliente (opcional),
                observacoes (opcional)

        Nada é gravado se alguma regra falhar.
        """
        exigir_capacidade(usuario, 'criar_auditoria')
        if not usuario.ativo:
            raise PermissionDenied("Usuário inativo não pode criar auditorias")

        titulo = (dados.get('titulo') or '').strip()
        if len(titulo) < 3:
            raise ValidationError("Título deve ter no mínimo 3 caracteres", code='titulo_invalido')

        cliente = self._resolver_cliente(dados.get('cliente'))
        local = (dados.get('local') or '').strip()
        if not local and cliente is not None:
            local = cliente.endereco_completo
        if len(local) < 3:
            raise ValidationError("Localização deve ter no mínimo 3 caracteres", code='local_invalido')

        data_agendada = dados.get('data_agendada')
        if not data_agendada:
            raise ValidationError("Data da auditoria é obrigatória", code='data_obrigatoria')
        if timezone.is_naive(data_agendada):
            data_agendada = timezone.make_aware(data_agendada)

        auditor_id = getattr(dados.get('auditor'), 'pk', dados.get('auditor'))

        with transaction.atomic():
            try:
                auditor = Usuario.objects.select_for_update().get(
                    pk=auditor_id, tipo=Usuario.TIPO_AUDITOR
                )
            except (Usuario.DoesNotExist, ValueError, TypeError):
                raise ValidationError("Auditor não encontrado", code='auditor_inexistente')

            if not auditor.ativo:
                raise ValidationError("Este auditor está inativo", code='auditor_inativo')

            if auditor.total_auditorias >= auditor.limite_auditorias:
                raise ValidationError(
                    "Este auditor já atingiu o limite máximo de auditorias",
                    code='limite_auditorias'
                )

            auditoria = Auditoria.objects.create(
                titulo=titulo,
                local=local,
                data_agendada=data_agendada,
                cliente=cliente,
                auditor=auditor,
                observacoes=(dados.get('observacoes') or '').strip(),
                status=Auditoria.STATUS_PENDENTE,
                criado_por=usuario,
            )

            auditor.total_auditorias += 1
            auditor.save(update_fields=['total_auditorias', 'atualizado_em'])

        logger.info(
            f"Auditoria {auditoria.pk} criada por {usuario.email} para {auditor.email} "
            f"({auditor.total_auditorias}/{auditor.limite_auditorias})"
        )
        return auditoria

    # =================== FOTOS ===================

    def enviar_fotos(self, usuario, auditoria_id, arquivos: Iterable,
                     tipo: str = FotoAuditoria.TIPO_EVIDENCIA) -> Tuple[List[FotoAuditoria], List[str]]:
        """
        Envia um lote de fotos para a auditoria

        O lote inteiro é recusado se ultrapassar o limite de fotos. Arquivos
        grandes demais ou que não são imagens são ignorados individualmente.

        A contagem e as inserções acontecem com a auditoria travada, então
        lotes simultâneos não passam do limite. Se a transação falhar, os
        arquivos já gravados no storage são apagados.

        Returns:
            Tuple[fotos_enviadas, mensagens_de_rejeicao]
        """
        arquivos = list(arquivos)
        enviadas = []
        rejeitadas = []
        tamanho_maximo = settings.AUDITORIA_FOTO_TAMANHO_MAXIMO

        try:
            with transaction.atomic():
                auditoria = Auditoria.objects.select_for_update().get(pk=auditoria_id)
                self._verificar_envio(usuario, auditoria)

                if not arquivos:
                    raise ValidationError("Nenhuma foto selecionada", code='sem_fotos')

                limite = settings.AUDITORIA_FOTOS_OBRIGATORIAS
                if auditoria.fotos.count() + len(arquivos) > limite:
                    raise ValidationError(
                        f"Limite máximo de {limite} fotos por relatório",
                        code='limite_fotos'
                    )

                for arquivo in arquivos:
                    nome = getattr(arquivo, 'name', '') or 'foto'

                    if arquivo.size > tamanho_maximo:
                        rejeitadas.append(f"{nome}: arquivo maior que {tamanho_maximo // (1024 * 1024)}MB")
                        continue

                    if not self._imagem_valida(arquivo):
                        rejeitadas.append(f"{nome}: arquivo não é uma imagem válida")
                        continue

                    foto = FotoAuditoria(
                        auditoria=auditoria,
                        tipo=tipo or FotoAuditoria.TIPO_EVIDENCIA,
                        nome_original=nome[:255],
                        tamanho=arquivo.size,
                    )
                    foto.arquivo.save(nome, arquivo, save=False)
                    enviadas.append(foto)
                    foto.save()
        except Exception:
            for foto in enviadas:
                _apagar_arquivo(foto.arquivo.name)
            raise

        logger.info(
            f"{len(enviadas)} foto(s) enviada(s) para auditoria {auditoria_id} por {usuario.email}; "
            f"{len(rejeitadas)} rejeitada(s)"
        )
        return enviadas, rejeitadas

    def remover_foto(self, usuario, foto_id) -> None:
        """Remove a foto; o arquivo sai do storage após o commit"""
        foto = FotoAuditoria.objects.select_related('auditoria').get(pk=foto_id)
        self._verificar_envio(usuario, foto.auditoria)

        with transaction.atomic():
            foto.delete()

        logger.info(f"Foto {foto_id} removida da auditoria {foto.auditoria_id} por {usuario.email}")

    # =================== RELATÓRIO ===================

    def enviar_relatorio(self, usuario, auditoria_id, dados: Dict) -> RelatorioAuditoria:
        """
        Grava o relatório e conclui a auditoria

        Inserção do relatório, mudança de status e liberação da vaga do
        auditor acontecem na mesma transação.
        """
        with transaction.atomic():
            auditoria = Auditoria.objects.select_for_update().get(pk=auditoria_id)

            if not AuditoriaPermissions.pode_enviar_relatorio(usuario, auditoria):
                raise PermissionDenied("Você não pode enviar relatório para esta auditoria")

            if RelatorioAuditoria.objects.filter(auditoria=auditoria).exists():
                raise ValidationError(
                    "Esta auditoria já possui um relatório",
                    code='relatorio_existente'
                )

            if not auditoria.esta_pendente:
                raise ValidationError(
                    "Esta auditoria não está mais pendente",
                    code='status_invalido'
                )

            if auditoria.fotos.count() != settings.AUDITORIA_FOTOS_OBRIGATORIAS:
                raise ValidationError(
                    "É necessário enviar todas as fotos obrigatórias",
                    code='fotos_incompletas'
                )

            valor_total = self._validar_dados_relatorio(dados)

            relatorio = RelatorioAuditoria(
                auditoria=auditoria,
                horario_chegada=dados['horario_chegada'],
                horario_saida=dados['horario_saida'],
                valor_total=valor_total,
                numero_nota_fiscal=str(dados['numero_nota_fiscal']).strip(),
                observacoes=str(dados['observacoes']).strip(),
                nao_conformidades=(dados.get('nao_conformidades') or '').strip(),
                enviado_por=usuario,
                **{campo: bool(dados.get(campo)) for campo in CAMPOS_CHECKLIST}
            )
            relatorio.full_clean(exclude=['auditoria', 'enviado_por'])
            relatorio.save()

            auditoria.status = Auditoria.STATUS_CONCLUIDA
            auditoria.save(update_fields=['status', 'atualizado_em'])

            self._liberar_vaga(auditoria.auditor_id)

        logger.info(f"Relatório da auditoria {auditoria.pk} enviado por {usuario.email}")
        return relatorio

    # =================== CANCELAMENTO / EXCLUSÃO ===================

    def cancelar_auditoria(self, usuario, auditoria_id) -> Auditoria:
        exigir_capacidade(usuario, 'cancelar_auditoria')

        with transaction.atomic():
            auditoria = Auditoria.objects.select_for_update().get(pk=auditoria_id)

            if not auditoria.esta_pendente:
                raise ValidationError(
                    "Apenas auditorias pendentes podem ser canceladas",
                    code='status_invalido'
                )

            auditoria.status = Auditoria.STATUS_CANCELADA
            auditoria.save(update_fields=['status', 'atualizado_em'])
            self._liberar_vaga(auditoria.auditor_id)

        logger.info(f"Auditoria {auditoria.pk} cancelada por {usuario.email}")
        return auditoria

    def excluir_auditoria(self, usuario, auditoria_id) -> None:
        """
        Exclui a auditoria com relatório e fotos

        O banco remove relatório e fotos em cascata. Os arquivos são
        apagados depois do commit: cada foto pelo signal de post_delete e,
        em seguida, qualquer sobra no prefixo da auditoria.
        """
        exigir_capacidade(usuario, 'excluir_auditoria')

        with transaction.atomic():
            auditoria = Auditoria.objects.select_for_update().get(pk=auditoria_id)
            pendente = auditoria.esta_pendente
            auditor_id = auditoria.auditor_id
            prefixo = auditoria.caminho_fotos

            auditoria.delete()

            if pendente:
                self._liberar_vaga(auditor_id)

            transaction.on_commit(lambda: limpar_prefixo_fotos(prefixo))

        logger.info(f"Auditoria {auditoria_id} excluída por {usuario.email}")

    # =================== MÉTODOS PRIVADOS ===================

    def _resolver_cliente(self, cliente):
        if cliente in (None, ''):
            return None
        if isinstance(cliente, Cliente):
            return cliente
        try:
            return Cliente.objects.get(pk=cliente)
        except (Cliente.DoesNotExist, ValueError, TypeError):
            raise ValidationError("Cliente não encontrado", code='cliente_inexistente')

    def _verificar_envio(self, usuario, auditoria):
        if not AuditoriaPermissions.pode_enviar_relatorio(usuario, auditoria):
            raise PermissionDenied("Você não pode enviar fotos para esta auditoria")
        if not auditoria.esta_pendente:
            raise ValidationError("Esta auditoria não está mais pendente", code='status_invalido')

    def _imagem_valida(self, arquivo) -> bool:
        """Confere com o Pillow se o conteúdo é de fato uma imagem"""
        try:
            arquivo.seek(0)
            with Image.open(arquivo) as imagem:
                imagem.verify()
            return True
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
            return False
        finally:
            arquivo.seek(0)

    def _validar_dados_relatorio(self, dados: Dict) -> Decimal:
        faltando = [
            rotulo for campo, rotulo in CAMPOS_OBRIGATORIOS_RELATORIO.items()
            if dados.get(campo) in (None, '') or (isinstance(dados.get(campo), str) and not dados[campo].strip())
        ]
        if faltando:
            raise ValidationError(
                f"Preencha os campos obrigatórios: {', '.join(faltando)}",
                code='campos_obrigatorios'
            )

        try:
            valor_total = Decimal(str(dados['valor_total']))
        except InvalidOperation:
            raise ValidationError("Valor total inválido", code='valor_invalido')

        if valor_total < 0:
            raise ValidationError("O valor total não pode ser negativo", code='valor_invalido')

        return valor_total

    def _liberar_vaga(self, auditor_id):
        """Devolve uma vaga ao auditor sem deixar o contador negativo"""
        auditor = Usuario.objects.select_for_update().get(pk=auditor_id)
        if auditor.total_auditorias > 0:
            auditor.total_auditorias -= 1
            auditor.save(update_fields=['total_auditorias', 'atualizado_em'])


def _apagar_arquivo(nome: str) -> None:
    """Remove um arquivo gravado por uma transação que não chegou ao commit"""
    try:
        default_storage.delete(nome)
        logger.debug(f"Arquivo descartado após rollback: {nome}")
    except Exception:
        logger.exception(f"Falha ao remover {nome} do storage")


def limpar_prefixo_fotos(prefixo: str) -> int:
    """
    Apaga todos os arquivos restantes em um prefixo do storage

    Falhas são registradas e não interrompem a limpeza.
    """
    try:
        _, arquivos = default_storage.listdir(prefixo)
    except FileNotFoundError:
        return 0
    except Exception:
        logger.exception(f"Não foi possível listar o prefixo {prefixo}")
        return 0

    removidos = 0
    for nome in arquivos:
        caminho = f"{prefixo}/{nome}"
        try:
            default_storage.delete(caminho)
            removidos += 1
        except Exception:
            logger.exception(f"Falha ao remover {caminho} do storage")

    if removidos:
        logger.info(f"{removidos} arquivo(s) removido(s) de {prefixo}")
    return removidos


def prefixos_orfaos() -> List[str]:
    """Prefixos de fotos cuja auditoria não existe mais"""
    raiz = settings.AUDITORIA_FOTOS_PREFIXO
    try:
        diretorios, _ = default_storage.listdir(raiz)
    except FileNotFoundError:
        return []

    existentes = {
        str(pk) for pk in Auditoria.objects.filter(
            pk__in=[d for d in diretorios if d.isdigit()]
        ).values_list('pk', flat=True)
    }
    return [caminho_fotos_auditoria(d) for d in diretorios if d not in existentes]


# Instância global do serviço (Singleton pattern)
auditoria_service = AuditoriaService()
