import importlib

import pytest

from central_games import Noob, TipoCategoria, Usuario, Veterano, load_settings


def test_upgrade_example(usuario):
    usuario.adiciona_x2p(1100)

    assert usuario.upgrade_categoria() is True
    assert usuario.categoria.tipo is TipoCategoria.VETERANO
    assert usuario.upgrade_categoria() is False


def test_upgrade_needs_more_than_limit(usuario):
    usuario.adiciona_x2p(1000)
    assert usuario.upgrade_categoria() is False
    assert usuario.categoria.tipo is TipoCategoria.NOOB


def test_downgrade_only_for_veterano(usuario):
    assert usuario.downgrade_categoria() is False

    usuario.adiciona_x2p(1001)
    usuario.upgrade_categoria()
    assert usuario.downgrade_categoria() is False

    usuario.adiciona_x2p(-1)
    assert usuario.downgrade_categoria() is True
    assert usuario.categoria.tipo is TipoCategoria.NOOB


def test_limit_comes_from_settings(monkeypatch):
    monkeypatch.setattr(load_settings, "limite_veterano", 500)
    usuario = Usuario("Fulano", "fulano")
    usuario.adiciona_x2p(600)

    assert usuario.upgrade_categoria() is True


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("CENTRAL_GAMES_LIMITE_VETERANO", "250")
    monkeypatch.setenv("CENTRAL_GAMES_LOG_LEVEL", "DEBUG")
    try:
        importlib.reload(load_settings)
        assert load_settings.limite_veterano == 250
        assert load_settings.log_level == "DEBUG"
    finally:
        monkeypatch.delenv("CENTRAL_GAMES_LIMITE_VETERANO")
        monkeypatch.delenv("CENTRAL_GAMES_LOG_LEVEL")
        importlib.reload(load_settings)

    assert load_settings.limite_veterano == 1000


def test_configure_logging_uses_level(monkeypatch):
    calls = []
    monkeypatch.setattr(load_settings.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    load_settings.configure_logging("debug")
    load_settings.configure_logging()

    assert calls == [{"level": "DEBUG"}, {"level": load_settings.log_level.upper()}]


def test_custom_noob_policy_survives_upgrade_and_downgrade():
    politica = Noob(desconto=1.0)
    usuario = Usuario("Fulano", "fulano", categoria=politica)

    usuario.adiciona_x2p(1001)
    assert usuario.upgrade_categoria() is True
    assert usuario.categoria.get_desconto() == pytest.approx(0.8)

    usuario.adiciona_x2p(-1)
    assert usuario.downgrade_categoria() is True
    assert usuario.categoria is politica
    assert usuario.categoria.get_desconto() == pytest.approx(1.0)


def test_custom_veterano_policy_survives_downgrade_and_upgrade():
    politica = Veterano(desconto=0.5, bonus_x2p=20)
    usuario = Usuario("Vet", "vet", categoria=politica)
    assert usuario.categoria is politica

    usuario.adiciona_x2p(1000)
    assert usuario.downgrade_categoria() is True
    assert usuario.categoria.tipo is TipoCategoria.NOOB

    usuario.adiciona_x2p(1)
    assert usuario.upgrade_categoria() is True
    assert usuario.categoria is politica
