"""
Repositório de filmes em memória

Armazena os documentos importados da lista de filmes.
Consultas sempre retornam os filmes ordenados por ano.
"""

import logging
import threading
import uuid
from typing import Dict, List

from ..models import Movie

logger = logging.getLogger(__name__)


class MovieRepository:
    """
    Document store em memória para os filmes indicados

    Endpoints síncronos do FastAPI rodam em threads, por isso o acesso
    é protegido por lock.
    """

    def __init__(self):
        self._movies: List[Movie] = []
        self._lock = threading.Lock()

    def create(self, data: Dict) -> Movie:
        """
        Insere um filme e retorna o documento com id gerado

        Args:
            data: Campos year, title, studios, producers e winner
        """
        movie = Movie(id=uuid.uuid4().hex, **data)
        with self._lock:
            self._movies.append(movie)
        return movie

    def find_all(self) -> List[Movie]:
        """Todos os filmes, ordenados por ano"""
        with self._lock:
            return sorted(self._movies, key=lambda movie: movie.year)

    def find_all_winners(self) -> List[Movie]:
        """Apenas os filmes vencedores, ordenados por ano"""
        with self._lock:
            winners = [movie for movie in self._movies if movie.winner]
        return sorted(winners, key=lambda movie: movie.year)

    def count(self) -> int:
        with self._lock:
            return len(self._movies)

    def clear(self):
        with self._lock:
            removed = len(self._movies)
            self._movies = []
        logger.info(f"Repositório limpo: {removed} filmes removidos")
