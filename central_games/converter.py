from central_games.models.dc_models import JogoModel, UsuarioModel
from central_games.models.game import Jogo
from central_games.models.user import Usuario


class DataConverter:
    """This class is used to convert domain objects into transport snapshots."""

    def convert_jogo_to_jogomodel(self, jogo: Jogo) -> JogoModel:
        """Convert a Jogo to the immutable JogoModel

        Args:
            jogo (Jogo): Game owned by a user

        Returns:
            JogoModel: Snapshot of the game and its play statistics
        """
        return JogoModel(
            nome=jogo.nome,
            tipo=jogo.tipo,
            preco=jogo.preco,
            jogabilidades=sorted(jogo.jogabilidades, key=lambda j: j.value),
            vezes_jogadas=jogo.vezes_jogadas,
            maior_score=jogo.maior_score,
            vezes_zerou=jogo.vezes_zerou,
        )

    def convert_usuario_to_usuariomodel(self, usuario: Usuario) -> UsuarioModel:
        """Convert a Usuario to the immutable UsuarioModel

        Games are listed by name so that two snapshots of the same user compare equal.

        Args:
            usuario (Usuario): The user to export

        Returns:
            UsuarioModel: Snapshot of the user
        """
        return UsuarioModel(
            nome=usuario.nome,
            login=usuario.login,
            saldo=usuario.saldo,
            x2p=usuario.x2p,
            categoria=usuario.categoria.tipo,
            jogos=[
                self.convert_jogo_to_jogomodel(jogo)
                for jogo in sorted(usuario.jogos, key=lambda j: j.nome)
            ],
        )
