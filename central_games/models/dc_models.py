from pydantic import BaseModel, ConfigDict
from typing import List

from central_games.domain.categories import TipoCategoria
from central_games.models.game import Jogabilidade


class JogoModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    nome: str
    tipo: str
    preco: float
    jogabilidades: List[Jogabilidade]
    vezes_jogadas: int
    maior_score: int
    vezes_zerou: int


class UsuarioModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    nome: str
    login: str
    saldo: float
    x2p: int
    categoria: TipoCategoria
    jogos: List[JogoModel]
