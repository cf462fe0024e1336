"""Domain model of a game-platform user: balance, games library, x2p and loyalty category."""

from central_games.domain.categories import Categoria, Noob, TipoCategoria, Veterano
from central_games.exceptions import (
    CentralGamesError,
    InsufficientFunds,
    NotFound,
    ValidationError,
)
from central_games.models.game import Jogabilidade, Jogo
from central_games.models.user import Usuario, chave_usuario

__version__ = "0.1.0"

__all__ = [
    "Categoria",
    "Noob",
    "Veterano",
    "TipoCategoria",
    "Jogabilidade",
    "Jogo",
    "Usuario",
    "chave_usuario",
    "CentralGamesError",
    "InsufficientFunds",
    "NotFound",
    "ValidationError",
]
