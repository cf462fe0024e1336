from typing import ClassVar

import pytest

from central_games import Jogabilidade, Jogo, Noob, Usuario


class JogoDeTeste(Jogo):
    """Game worth one x2p per thousand score points, plus 5 when finished."""

    tipo: ClassVar[str] = "Teste"

    def registra_jogada(self, score: int, zerou: bool) -> int:
        self._registra_estatisticas(score, zerou)
        return score // 1000 + (5 if zerou else 0)


@pytest.fixture
def make_jogo():
    def _make(nome="Zelda", preco=50.0, jogabilidades=()):
        return JogoDeTeste(nome=nome, preco=preco, jogabilidades=set(jogabilidades))

    return _make


@pytest.fixture
def usuario():
    return Usuario("Fulano de Tal", "fulano")


@pytest.fixture
def usuario_sem_desconto():
    return Usuario("Beltrano", "beltrano", categoria=Noob(desconto=1.0))


@pytest.fixture
def jogo_offline(make_jogo):
    return make_jogo(
        nome="Mario", preco=10.0, jogabilidades=(Jogabilidade.OFFLINE, Jogabilidade.MULTIPLAYER)
    )
