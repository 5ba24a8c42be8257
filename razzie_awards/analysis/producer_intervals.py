"""
Análise de intervalos entre prêmios
Golden Raspberry Awards - Pior Filme

Para cada produtor que venceu mais de uma vez, calcula o intervalo em anos
entre vitórias consecutivas e retorna os produtores com o menor e o maior
intervalo.

Etapas:
1. Expansão dos créditos (um registro por produtor)
2. Agrupamento por produtor e cálculo dos intervalos
3. Seleção dos extremos (mínimo e máximo globais, com empates)

Funções puras: não fazem I/O e não alteram a entrada.
"""

import re
from typing import Dict, Iterable, List

from ..models import ExpandedCredit, IntervalEntry, IntervalReport

# "and" só é separador como palavra isolada (case-sensitive), delimitada por
# espaço, vírgula ou extremidade da string.
# Nomes que contêm "and" como palavra são indistinguíveis de um separador.
AND_TOKEN = re.compile(r"(?<![^\s,])and(?![^\s,])")
AND_SEPARATOR = re.compile(r"(?:^|\s+)and(?:\s+|$)")


def split_producers(producers: str) -> List[str]:
    """
    Separa uma string de créditos em nomes de produtores

    Sem o separador "and" a string inteira é um único produtor.
    Com ele, divide por vírgula e depois por "and".

    Args:
        producers: Ex.: "David Black, Emily White and Michael Johnson"

    Returns:
        Lista de nomes sem espaços nas pontas (tokens vazios descartados)
    """
    if not AND_TOKEN.search(producers):
        name = producers.strip()
        return [name] if name else []

    names = []
    for segment in producers.split(","):
        for token in AND_SEPARATOR.split(segment):
            token = token.strip()
            if token:
                names.append(token)
    return names


def expand_credits(records: Iterable) -> List[ExpandedCredit]:
    """Gera um ExpandedCredit por produtor de cada filme vencedor"""
    return [
        ExpandedCredit(year=record.year, producer=producer)
        for record in records
        for producer in split_producers(record.producers)
    ]


def compute_intervals(credits: Iterable[ExpandedCredit]) -> List[IntervalEntry]:
    """
    Calcula os intervalos entre vitórias consecutivas de cada produtor

    Produtores com uma única vitória não geram intervalos. A ordem de saída
    segue a primeira aparição de cada produtor e, dentro dele, os anos em
    ordem crescente. Anos repetidos geram intervalo 0.
    """
    wins_by_producer: Dict[str, List[int]] = {}
    for credit in credits:
        wins_by_producer.setdefault(credit.producer, []).append(credit.year)

    entries = []
    for producer, years in wins_by_producer.items():
        if len(years) < 2:
            continue

        years = sorted(years)
        for previous_win, following_win in zip(years, years[1:]):
            entries.append(
                IntervalEntry(
                    producer=producer,
                    interval=following_win - previous_win,
                    previous_win=previous_win,
                    following_win=following_win,
                )
            )
    return entries


def select_extremes(entries: List[IntervalEntry]) -> IntervalReport:
    """
    Seleciona todas as entradas com o menor e com o maior intervalo

    A ordem original das entradas é mantida (filtro, sem reordenar).
    Se existir um único valor de intervalo, min e max são iguais.
    """
    if not entries:
        return IntervalReport(min=[], max=[])

    by_interval: Dict[int, List[IntervalEntry]] = {}
    for entry in entries:
        by_interval.setdefault(entry.interval, []).append(entry)

    return IntervalReport(
        min=by_interval[min(by_interval)],
        max=by_interval[max(by_interval)],
    )


def analyze_producer_intervals(records: Iterable) -> IntervalReport:
    """
    Executa a análise completa sobre os filmes vencedores

    Args:
        records: Filmes vencedores (objetos com `year` e `producers`)

    Returns:
        IntervalReport com as listas `min` e `max`
    """
    credits = expand_credits(records)
    entries = compute_intervals(credits)
    return select_extremes(entries)
