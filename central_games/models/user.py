import logging
from typing import Dict, FrozenSet, Optional, Set

from central_games import load_settings
from central_games.domain.categories import Categoria, TipoCategoria, nova_categoria
from central_games.domain.category_rules import (
    proxima_categoria_downgrade,
    proxima_categoria_upgrade,
)
from central_games.exceptions import InsufficientFunds, NotFound, ValidationError
from central_games.models.game import Jogo

SEPARADOR = "-" * 44


def chave_usuario(usuario: "Usuario") -> str:
    """Identity key of a user. Any mapping or set over users is keyed by it."""
    return usuario.login


class Usuario:
    """A platform user: balance, games library, x2p and loyalty category.

    The aggregate is not thread-safe. Callers sharing a user between threads
    must hold the user's lock (see UserSyncManager).
    """

    def __init__(self, nome: str, login: str, categoria: Optional[Categoria] = None):
        self.nome = nome
        self._login = login
        self._saldo = 0.0
        self._x2p = 0
        self._jogos: Set[Jogo] = set()
        # one policy per tier; a custom policy survives upgrades and downgrades
        self._politicas: Dict[TipoCategoria, Categoria] = {
            tipo: nova_categoria(tipo) for tipo in TipoCategoria
        }
        if categoria is None:
            categoria = self._politicas[TipoCategoria.NOOB]
        self._politicas[categoria.tipo] = categoria
        self._categoria: Categoria = categoria

    @property
    def login(self) -> str:
        return self._login

    @property
    def saldo(self) -> float:
        return self._saldo

    @property
    def x2p(self) -> int:
        return self._x2p

    @property
    def categoria(self) -> Categoria:
        return self._categoria

    @property
    def jogos(self) -> FrozenSet[Jogo]:
        return frozenset(self._jogos)

    def deposita_dinheiro(self, valor: float):
        """Add money to the balance. Negative amounts add nothing."""
        self._saldo += max(valor, 0)

    def desconta_dinheiro(self, valor: float):
        """Take money from the balance. Negative amounts take nothing.

        There is no lower bound here; only compra_jogo checks for funds.
        """
        self._saldo -= max(valor, 0)

    def compra_jogo(self, jogo: Jogo) -> bool:
        """Buy a game with the category discount and earn the purchase bonus

        The funds check runs before the ownership check, so an owned game the
        user cannot afford reports InsufficientFunds.

        Args:
            jogo (Jogo): Game to buy

        Raises:
            InsufficientFunds: The balance is below the discounted price
            ValidationError: The user already owns the game

        Returns:
            bool: True once the game is in the library
        """
        preco_efetivo = jogo.preco * self._categoria.get_desconto()
        if self._saldo < preco_efetivo:
            logging.warning(
                f"{self.login}: insufficient funds for {jogo.nome} "
                f"(saldo={self._saldo}, preco={preco_efetivo})"
            )
            raise InsufficientFunds("Dinheiro insuficiente")
        if self.tem_jogo(jogo):
            logging.warning(f"{self.login}: already owns {jogo.nome}")
            raise ValidationError("Usuario ja possui este jogo.")

        self.desconta_dinheiro(preco_efetivo)
        self.adiciona_x2p(int(self._categoria.bonus_na_compra_x2p() * jogo.preco))
        self._jogos.add(jogo)
        logging.info(f"{self.login} bought {jogo.nome} for {preco_efetivo}")
        return True

    def adiciona_x2p(self, x2p: int):
        self._x2p += x2p

    def recompensar(self, nome_do_jogo: str, score: int, zerou: bool):
        """Register a play and reward the user according to the category

        Args:
            nome_do_jogo (str): Name of an owned game
            score (int): Score obtained
            zerou (bool): Whether the game was finished

        Raises:
            NotFound: The user does not own a game with that name
        """
        jogo = self.get_jogo(nome_do_jogo)
        x2p_acumulada = jogo.registra_jogada(score, zerou)
        recompensa = self._categoria.recompensar(self, nome_do_jogo)
        self.adiciona_x2p(x2p_acumulada + recompensa)
        logging.info(f"{self.login} rewarded on {nome_do_jogo}: {x2p_acumulada + recompensa} x2p")

    def punir(self, nome_do_jogo: str, score: int, zerou: bool):
        """Register a play, apply the category penalty and check for a downgrade

        Args:
            nome_do_jogo (str): Name of an owned game
            score (int): Score obtained
            zerou (bool): Whether the game was finished

        Raises:
            NotFound: The user does not own a game with that name
        """
        jogo = self.get_jogo(nome_do_jogo)
        x2p_acumulada = jogo.registra_jogada(score, zerou)
        punicao = self._categoria.punir(self, nome_do_jogo)
        self.adiciona_x2p(x2p_acumulada + punicao)
        logging.info(f"{self.login} punished on {nome_do_jogo}: {x2p_acumulada + punicao} x2p")
        self.downgrade_categoria()

    def tem_jogo(self, jogo: Jogo) -> bool:
        return jogo in self._jogos

    def get_jogo(self, nome_do_jogo: str) -> Jogo:
        for jogo in self._jogos:
            if jogo.nome == nome_do_jogo:
                return jogo
        logging.warning(f"{self.login}: game not found: {nome_do_jogo}")
        raise NotFound("Jogo nao encontrado")

    def upgrade_categoria(self) -> bool:
        """Promote a Noob with more than the configured x2p limit to Veterano."""
        tipo = proxima_categoria_upgrade(self._x2p, self._categoria, load_settings.limite_veterano)
        return self._aplica_categoria(tipo)

    def downgrade_categoria(self) -> bool:
        """Demote a Veterano at or below the configured x2p limit to Noob."""
        tipo = proxima_categoria_downgrade(self._x2p, self._categoria, load_settings.limite_veterano)
        return self._aplica_categoria(tipo)

    def _aplica_categoria(self, tipo: Optional[TipoCategoria]) -> bool:
        if tipo is None:
            return False
        nova = self._politicas[tipo]
        logging.info(
            f"{self.login}: {self._categoria.representacao()} -> {nova.representacao()}"
        )
        self._categoria = nova
        return True

    def preco_total_dos_jogos(self) -> int:
        # each price is truncated to whole units before summing
        total = 0
        for jogo in self._jogos:
            total += int(jogo.preco)
        return total

    def __eq__(self, other) -> bool:
        if not isinstance(other, Usuario):
            return NotImplemented
        return chave_usuario(self) == chave_usuario(other)

    def __hash__(self) -> int:
        return hash(chave_usuario(self))

    def __repr__(self) -> str:
        return f"Usuario(nome={self.nome!r}, login={self.login!r})"

    def __str__(self) -> str:
        texto = (
            f"\nJogador {self._categoria.representacao()}: {self.login}\n"
            f"{self.nome} - {self.x2p} x2p\n"
            "Lista de Jogos:\n"
        )
        for jogo in self._jogos:
            texto += f"{jogo}\n"
        texto += f"Total de preco dos jogos: R$ {self.preco_total_dos_jogos()},00\n"
        texto += SEPARADOR
        return texto
