"""
Testes de busca e filtro das listas.
"""
from types import SimpleNamespace

import pytest

from apps.core.filtros import (
    filtrar_auditores,
    filtrar_auditorias,
    filtrar_clientes,
    filtrar_colecao,
)


def auditor(nome, email, telefone='', ativo=True):
    return SimpleNamespace(nome=nome, email=email, telefone=telefone, ativo=ativo)


def auditoria(titulo, local, status='pending'):
    return SimpleNamespace(titulo=titulo, local=local, status=status)


@pytest.fixture
def auditores():
    return [
        auditor('Ana Souza', 'ana@auditoria.com', '(11) 98765-4321'),
        auditor('Bruno Lima', 'bruno@auditoria.com', ativo=False),
        auditor('Carla Dias', 'carla@exemplo.com', '(21) 3333-4444'),
    ]


@pytest.fixture
def auditorias():
    return [
        auditoria('Visita Sabor', 'Rua das Flores, 100'),
        auditoria('Visita Padaria', 'Av. Brasil, 50', 'completed'),
        auditoria('Retorno Sabor', 'Rua das Flores, 100', 'cancelled'),
    ]


class TestFiltrarColecao:

    def test_sem_busca_e_sem_filtro_devolve_tudo(self, auditores):
        assert filtrar_auditores(auditores) == auditores

    def test_busca_sem_diferenciar_maiusculas(self, auditores):
        resultado = filtrar_auditores(auditores, busca='ANA')
        assert [a.nome for a in resultado] == ['Ana Souza']

    def test_busca_em_qualquer_campo(self, auditores):
        assert [a.nome for a in filtrar_auditores(auditores, busca='exemplo')] == ['Carla Dias']
        assert [a.nome for a in filtrar_auditores(auditores, busca='3333')] == ['Carla Dias']

    def test_busca_ignora_espacos_nas_pontas(self, auditores):
        assert len(filtrar_auditores(auditores, busca='  auditoria.com ')) == 2

    def test_filtro_de_status(self, auditores):
        assert [a.nome for a in filtrar_auditores(auditores, filtro='inactive')] == ['Bruno Lima']
        assert len(filtrar_auditores(auditores, filtro='active')) == 2

    def test_busca_e_filtro_combinados(self, auditores):
        assert filtrar_auditores(auditores, busca='bruno', filtro='active') == []

    def test_mantem_ordem_de_entrada(self, auditores):
        invertidos = list(reversed(auditores))
        assert filtrar_auditores(invertidos, busca='a') == invertidos

    def test_idempotente(self, auditorias):
        uma_vez = filtrar_auditorias(auditorias, busca='sabor', filtro='resolved')
        duas_vezes = filtrar_auditorias(uma_vez, busca='sabor', filtro='resolved')
        assert uma_vez == duas_vezes

    def test_filtro_desconhecido(self, auditores):
        with pytest.raises(ValueError):
            filtrar_auditores(auditores, filtro='pending')

    def test_campo_nulo_nao_quebra_busca(self):
        itens = [SimpleNamespace(nome=None, ativo=True)]
        assert filtrar_colecao(itens, busca='x', campos=('nome',)) == []


class TestFiltrarAuditorias:

    def test_pendentes(self, auditorias):
        assert [a.titulo for a in filtrar_auditorias(auditorias, filtro='pending')] == ['Visita Sabor']

    def test_resolvidas(self, auditorias):
        resultado = filtrar_auditorias(auditorias, filtro='resolved')
        assert [a.status for a in resultado] == ['completed', 'cancelled']

    def test_inativas_sao_as_nao_pendentes(self, auditorias):
        assert len(filtrar_auditorias(auditorias, filtro='inactive')) == 2

    def test_busca_por_local(self, auditorias):
        assert len(filtrar_auditorias(auditorias, busca='flores')) == 2


class TestFiltrarClientes:

    def test_busca_por_estado(self):
        clientes = [
            SimpleNamespace(nome='Sabor', cidade='São Paulo', estado='SP', ativo=True),
            SimpleNamespace(nome='Mar', cidade='Niterói', estado='RJ', ativo=False),
        ]
        assert [c.nome for c in filtrar_clientes(clientes, busca='rj')] == ['Mar']
        assert [c.nome for c in filtrar_clientes(clientes, filtro='active')] == ['Sabor']
