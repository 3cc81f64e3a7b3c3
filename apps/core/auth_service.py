# apps/core/auth_service.py

"""
Serviço de Autenticação - Encapsula toda lógica de auth do sistema

Cadastro de auditores (auto-cadastro e pelo administrador), login por
email e logout. Os métodos públicos devolvem tuplas (sucesso, mensagem, ...)
para as views exibirem o resultado sem tratar exceções.
"""

import logging
from typing import Dict, Optional, Tuple

from django.contrib.auth import authenticate, login, logout
from django.db import IntegrityError, transaction

from .erros import CredenciaisInvalidas, mensagem_erro
from .models import Usuario
from .permissions import exigir_capacidade
from .utils import apenas_digitos, formatar_telefone, gerar_link_convite_whatsapp

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Serviço encapsulado para gerenciar autenticação

    O email é o identificador de login e também é gravado como username.
    """

    def __init__(self):
        # Atributos privados - encapsulados
        self._idade_minima = 18
        self._tamanho_minimo_senha = 6
        self._duracao_sessao_persistente = 86400 * 30  # 30 dias

    def registrar_auditor(self, dados: Dict) -> Tuple[bool, str, Optional[Usuario]]:
        """
        Auto-cadastro de auditor

        Args:
            dados: nome, email, telefone, idade, cidade_residencia, senha,
                confirmar_senha

        Returns:
            Tuple[sucesso, mensagem, usuario_criado]
        """
        validacao_ok, erro_validacao = self._validar_dados_auditor(dados, exigir_confirmacao=True)
        if not validacao_ok:
            return False, erro_validacao, None

        try:
            usuario = self._criar_auditor(dados)
        except IntegrityError as e:
            logger.warning(f"Cadastro recusado para {dados.get('email')}: {e}")
            return False, mensagem_erro(e), None

        logger.info(f"Auditor {usuario.email} cadastrado")
        return True, "Cadastro realizado com sucesso! Faça login para continuar.", usuario

    def criar_auditor(self, usuario_admin, dados: Dict) -> Tuple[bool, str, Optional[Usuario], Optional[str]]:
        """
        Cadastro de auditor pelo administrador

        Returns:
            Tuple[sucesso, mensagem, usuario_criado, link_convite_whatsapp]
        """
        exigir_capacidade(usuario_admin, 'gerenciar_auditores')

        validacao_ok, erro_validacao = self._validar_dados_auditor(dados, exigir_confirmacao=False)
        if not validacao_ok:
            return False, erro_validacao, None, None

        try:
            usuario = self._criar_auditor(dados)
        except IntegrityError as e:
            logger.warning(f"Cadastro recusado para {dados.get('email')}: {e}")
            return False, mensagem_erro(e), None, None

        link = None
        if usuario.telefone:
            link = gerar_link_convite_whatsapp(
                usuario.telefone, usuario.nome, usuario.email, dados['senha']
            )

        logger.info(f"Auditor {usuario.email} criado por {usuario_admin.email}")
        return True, "Auditor adicionado com sucesso", usuario, link

    def fazer_login(self, request, email: str, senha: str, lembrar_me: bool = False) -> Tuple[bool, str]:
        """
        Realiza login pelo email

        Returns:
            Tuple[sucesso, mensagem]
        """
        try:
            usuario = self._autenticar_usuario(email, senha)
        except CredenciaisInvalidas as e:
            logger.warning(f"Tentativa de login falhada para: {email}")
            return False, mensagem_erro(e)

        login(request, usuario)

        # Sem "lembrar-me" a sessão expira ao fechar o navegador
        if lembrar_me:
            request.session.set_expiry(self._duracao_sessao_persistente)
        else:
            request.session.set_expiry(0)

        return True, f"Bem-vindo, {usuario.get_full_name() or usuario.email}!"

    def fazer_logout(self, request) -> bool:
        """Realiza logout seguro"""
        logout(request)
        return True

    # =================== MÉTODOS PRIVADOS (ENCAPSULADOS) ===================

    def _validar_dados_auditor(self, dados: Dict, exigir_confirmacao: bool) -> Tuple[bool, str]:
        """Valida dados de entrada para cadastro de auditor"""
        for campo, rotulo in (('nome', 'Nome'), ('email', 'Email'), ('senha', 'Senha')):
            if not str(dados.get(campo) or '').strip():
                return False, f"Campo {rotulo} é obrigatório"

        email = dados['email'].strip()
        if '@' not in email or '.' not in email.split('@')[-1]:
            return False, "Email inválido"

        if Usuario.objects.filter(email__iexact=email).exists():
            return False, "Este email já está em uso"

        if len(dados['senha']) < self._tamanho_minimo_senha:
            return False, f"A senha deve ter pelo menos {self._tamanho_minimo_senha} caracteres"

        if exigir_confirmacao and dados['senha'] != dados.get('confirmar_senha'):
            return False, "As senhas não coincidem"

        idade = dados.get('idade')
        if idade not in (None, ''):
            try:
                idade = int(idade)
            except (TypeError, ValueError):
                return False, "Idade inválida"
            if idade < self._idade_minima:
                return False, f"É necessário ter pelo menos {self._idade_minima} anos"

        telefone = dados.get('telefone') or ''
        if telefone and len(apenas_digitos(telefone)) not in (10, 11):
            return False, "Telefone deve estar no formato (00) 00000-0000"

        return True, ""

    def _criar_auditor(self, dados: Dict) -> Usuario:
        email = dados['email'].strip().lower()
        idade = dados.get('idade')

        with transaction.atomic():
            return Usuario.objects.create_user(
                username=email,
                email=email,
                password=dados['senha'],  # Django já faz hash automaticamente
                nome=dados['nome'].strip(),
                telefone=formatar_telefone(dados.get('telefone') or ''),
                idade=int(idade) if idade not in (None, '') else None,
                cidade_residencia=(dados.get('cidade_residencia') or '').strip(),
                tipo=Usuario.TIPO_AUDITOR,
            )

    def _autenticar_usuario(self, email: str, senha: str) -> Usuario:
        """Autentica pelo email; levanta CredenciaisInvalidas se falhar"""
        email = (email or '').strip()
        usuario = authenticate(username=email.lower(), password=senha)

        if not usuario:
            # Contas antigas podem ter username diferente do email
            try:
                user_obj = Usuario.objects.get(email__iexact=email, is_active=True)
                usuario = authenticate(username=user_obj.username, password=senha)
            except Usuario.DoesNotExist:
                pass

        if not usuario:
            raise CredenciaisInvalidas(email)

        return usuario


# Instância global do serviço (Singleton pattern)
auth_service = AuthenticationService()
