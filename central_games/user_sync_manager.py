import logging
from contextlib import contextmanager
from threading import Lock
from typing import Dict, Iterator

from central_games.exceptions import NotFound, ValidationError
from central_games.models.user import Usuario, chave_usuario


class UserSyncManager:
    def __init__(self):
        self.users: Dict[str, Usuario] = {}  # keyed by chave_usuario
        self.locks: Dict[str, Lock] = {}  # one lock per login
        self.lock = Lock()  # protects users and locks

    def register(self, usuario: Usuario):
        """Register a user under its login

        Args:
            usuario (Usuario): User to register

        Raises:
            ValidationError: Another user already has this login
        """
        key = chave_usuario(usuario)
        with self.lock:
            if key in self.users:
                logging.warning(f"Login already registered: {key}")
                raise ValidationError(f"Login ja cadastrado: {key}")
            self.users[key] = usuario
            self.locks[key] = Lock()
        logging.info(f"Registered user: {key}")

    def get(self, login: str) -> Usuario:
        """Get the user registered under login

        Args:
            login (str): Login to look up

        Raises:
            NotFound: No user has this login

        Returns:
            Usuario: The registered user
        """
        with self.lock:
            if login not in self.users:
                raise NotFound(f"Usuario nao encontrado: {login}")
            return self.users[login]

    def unregister(self, login: str):
        """Delete the user and its lock. Unknown logins are ignored."""
        with self.lock:
            if login in self.users:
                del self.users[login]
                del self.locks[login]

    @contextmanager
    def locked(self, login: str) -> Iterator[Usuario]:
        """Hold the user's lock for the duration of the block

        Args:
            login (str): Login of the user

        Raises:
            NotFound: No user has this login

        Yields:
            Usuario: The locked user
        """
        with self.lock:
            if login not in self.users:
                raise NotFound(f"Usuario nao encontrado: {login}")
            usuario = self.users[login]
            user_lock = self.locks[login]
        with user_lock:
            yield usuario

    def __contains__(self, login: str) -> bool:
        with self.lock:
            return login in self.users

    def __len__(self) -> int:
        with self.lock:
            return len(self.users)
