"""Loyalty categories (Noob / Veterano) as pricing and scoring strategies.

Each category only differs in numbers: the purchase discount, the x2p bonus
per unit of price paid, and how each jogabilidade of a played game turns into
a reward or a penalty.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Dict

from central_games.models.game import Jogabilidade

if TYPE_CHECKING:
    from central_games.models.user import Usuario


class TipoCategoria(str, Enum):
    NOOB = "Noob"
    VETERANO = "Veterano"


NOOB_DESCONTO = 0.9
NOOB_BONUS_X2P = 10
VETERANO_DESCONTO = 0.8
VETERANO_BONUS_X2P = 15

NOOB_RECOMPENSAS: Dict[Jogabilidade, int] = {
    Jogabilidade.OFFLINE: 30,
    Jogabilidade.MULTIPLAYER: 10,
}
NOOB_PUNICOES: Dict[Jogabilidade, int] = {
    Jogabilidade.ONLINE: -10,
    Jogabilidade.COMPETITIVO: -20,
    Jogabilidade.COOPERATIVO: -50,
}
VETERANO_RECOMPENSAS: Dict[Jogabilidade, int] = {
    Jogabilidade.ONLINE: 10,
    Jogabilidade.COOPERATIVO: 20,
}
VETERANO_PUNICOES: Dict[Jogabilidade, int] = {
    Jogabilidade.OFFLINE: -20,
    Jogabilidade.COMPETITIVO: -20,
}


def pontos_por_jogabilidade(
    usuario: "Usuario", nome_do_jogo: str, tabela: Dict[Jogabilidade, int]
) -> int:
    """Sum the table entries for every jogabilidade the game has.

    Raises:
        NotFound: If the user does not own a game with that name.
    """
    jogo = usuario.get_jogo(nome_do_jogo)
    return sum(
        pontos
        for jogabilidade, pontos in tabela.items()
        if jogo.tem_jogabilidade(jogabilidade)
    )


class Categoria(ABC):
    """Strategy consulted by Usuario for prices and x2p deltas."""

    tipo: TipoCategoria

    def __init__(self, desconto: float, bonus_x2p: int):
        self._desconto = desconto
        self._bonus_x2p = bonus_x2p

    def get_desconto(self) -> float:
        """Factor applied to a game's price on purchase."""
        return self._desconto

    def bonus_na_compra_x2p(self) -> int:
        """x2p earned per unit of a purchased game's price."""
        return self._bonus_x2p

    @abstractmethod
    def recompensar(self, usuario: "Usuario", nome_do_jogo: str) -> int:
        ...

    @abstractmethod
    def punir(self, usuario: "Usuario", nome_do_jogo: str) -> int:
        ...

    def representacao(self) -> str:
        return self.tipo.value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Categoria):
            return NotImplemented
        return self.tipo is other.tipo

    def __hash__(self) -> int:
        return hash(self.tipo)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(desconto={self._desconto}, bonus_x2p={self._bonus_x2p})"


class Noob(Categoria):
    tipo = TipoCategoria.NOOB

    def __init__(self, desconto: float = NOOB_DESCONTO, bonus_x2p: int = NOOB_BONUS_X2P):
        super().__init__(desconto, bonus_x2p)

    def recompensar(self, usuario: "Usuario", nome_do_jogo: str) -> int:
        return pontos_por_jogabilidade(usuario, nome_do_jogo, NOOB_RECOMPENSAS)

    def punir(self, usuario: "Usuario", nome_do_jogo: str) -> int:
        return pontos_por_jogabilidade(usuario, nome_do_jogo, NOOB_PUNICOES)


class Veterano(Categoria):
    tipo = TipoCategoria.VETERANO

    def __init__(
        self, desconto: float = VETERANO_DESCONTO, bonus_x2p: int = VETERANO_BONUS_X2P
    ):
        super().__init__(desconto, bonus_x2p)

    def recompensar(self, usuario: "Usuario", nome_do_jogo: str) -> int:
        return pontos_por_jogabilidade(usuario, nome_do_jogo, VETERANO_RECOMPENSAS)

    def punir(self, usuario: "Usuario", nome_do_jogo: str) -> int:
        return pontos_por_jogabilidade(usuario, nome_do_jogo, VETERANO_PUNICOES)


def nova_categoria(tipo: TipoCategoria) -> Categoria:
    """Build the default strategy for the given tag."""
    if tipo is TipoCategoria.VETERANO:
        return Veterano()
    return Noob()
