from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Set

from pydantic import BaseModel, Field


class Jogabilidade(str, Enum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"
    MULTIPLAYER = "MULTIPLAYER"
    COOPERATIVO = "COOPERATIVO"
    COMPETITIVO = "COMPETITIVO"


class Jogo(BaseModel, ABC):
    """A game sold by the platform.

    Concrete game kinds decide how many x2p a single play is worth by
    implementing ``registra_jogada``. Two games are the same game when their
    names match.
    """

    tipo: ClassVar[str] = "Jogo"

    nome: str = Field(frozen=True)
    preco: float = Field(ge=0)
    jogabilidades: Set[Jogabilidade] = Field(default_factory=set)
    vezes_jogadas: int = 0
    maior_score: int = 0
    vezes_zerou: int = 0

    @abstractmethod
    def registra_jogada(self, score: int, zerou: bool) -> int:
        """Register one play of this game

        Args:
            score (int): Score obtained in the play
            zerou (bool): Whether the player finished the game

        Returns:
            int: x2p earned by the play
        """

    def _registra_estatisticas(self, score: int, zerou: bool):
        self.vezes_jogadas += 1
        if zerou:
            self.vezes_zerou += 1
        if score > self.maior_score:
            self.maior_score = score

    def tem_jogabilidade(self, jogabilidade: Jogabilidade) -> bool:
        return jogabilidade in self.jogabilidades

    def __eq__(self, other) -> bool:
        if not isinstance(other, Jogo):
            return NotImplemented
        return self.nome == other.nome

    def __hash__(self) -> int:
        return hash(self.nome)

    def __str__(self) -> str:
        return (
            f"+ {self.nome} - {self.tipo}:\n"
            f"==> Jogou {self.vezes_jogadas} vez(es)\n"
            f"==> Zerou {self.vezes_zerou} vez(es)\n"
            f"==> Maior score: {self.maior_score}"
        )
