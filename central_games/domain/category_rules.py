"""Category transition rules that are independent from the Usuario aggregate.

Both rules are pure: they look at the current x2p and category and return the
tag of the category the user should move to, or None when no transition
applies. The caller picks the policy for that tag and applies it.
"""

from typing import Optional

from central_games.domain.categories import Categoria, TipoCategoria

LIMITE_VETERANO = 1000


def pode_promover(x2p: int, categoria: Categoria, limite: int = LIMITE_VETERANO) -> bool:
    """Return True when a Noob has strictly more x2p than the limit."""
    return x2p > limite and categoria.tipo is TipoCategoria.NOOB


def deve_rebaixar(x2p: int, categoria: Categoria, limite: int = LIMITE_VETERANO) -> bool:
    """Return True when a Veterano has x2p at or below the limit."""
    return x2p <= limite and categoria.tipo is TipoCategoria.VETERANO


def proxima_categoria_upgrade(
    x2p: int, categoria: Categoria, limite: int = LIMITE_VETERANO
) -> Optional[TipoCategoria]:
    """Noob -> Veterano transition.

    Args:
        x2p (int): Current experience points
        categoria (Categoria): Current category
        limite (int, optional): x2p that must be exceeded. Defaults to 1000.

    Returns:
        Optional[TipoCategoria]: VETERANO, or None if the user stays put
    """
    if not pode_promover(x2p, categoria, limite):
        return None
    return TipoCategoria.VETERANO


def proxima_categoria_downgrade(
    x2p: int, categoria: Categoria, limite: int = LIMITE_VETERANO
) -> Optional[TipoCategoria]:
    """Veterano -> Noob transition.

    Args:
        x2p (int): Current experience points
        categoria (Categoria): Current category
        limite (int, optional): Highest x2p that still demotes. Defaults to 1000.

    Returns:
        Optional[TipoCategoria]: NOOB, or None if the user stays put
    """
    if not deve_rebaixar(x2p, categoria, limite):
        return None
    return TipoCategoria.NOOB
