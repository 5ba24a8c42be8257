"""
Serviço de prêmios
Liga importação, repositório e análise de intervalos
"""

import logging
from typing import List, Optional

from ..analysis.producer_intervals import analyze_producer_intervals
from ..config import get_settings
from ..data_pipeline.ingest_movies import MovieIngester
from ..models import ImportSummary, IntervalReport, Movie
from ..storage.movie_repository import MovieRepository

logger = logging.getLogger(__name__)


class AwardsService:
    def __init__(self, repository: MovieRepository, ingester: Optional[MovieIngester] = None):
        self.repository = repository
        self.ingester = ingester or MovieIngester(repository)

    def import_movies(self, source: Optional[str] = None, replace: bool = False) -> ImportSummary:
        """
        Importa a lista de filmes

        Args:
            source: Caminho local ou s3://; padrão é TC_MOVIES_CSV
            replace: Se deve substituir os filmes já importados
        """
        source = source or get_settings().movies_csv
        return self.ingester.import_movies(source, replace=replace)

    def find_all(self) -> List[Movie]:
        return self.repository.find_all()

    def find_worst_winners(self) -> IntervalReport:
        """Produtores com menor e maior intervalo entre vitórias"""
        winners = self.repository.find_all_winners()
        report = analyze_producer_intervals(winners)

        logger.info(f"Análise concluída: {len(winners)} vencedores, {len(report.min)} min, {len(report.max)} max")
        return report
