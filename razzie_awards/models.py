"""
Modelos Pydantic compartilhados entre API, armazenamento e análise
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """Filme indicado ao prêmio (registro armazenado)"""

    id: str
    year: int
    title: str
    studios: str
    producers: str
    winner: bool = False


class ExpandedCredit(BaseModel):
    """Um produtor individual de um filme vencedor"""

    model_config = ConfigDict(frozen=True)

    year: int
    producer: str


class IntervalEntry(BaseModel):
    """Intervalo entre duas vitórias consecutivas de um produtor"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    producer: str
    interval: int
    previous_win: int = Field(alias="previousWin")
    following_win: int = Field(alias="followingWin")


class IntervalReport(BaseModel):
    min: List[IntervalEntry] = []
    max: List[IntervalEntry] = []


class ImportSummary(BaseModel):
    source: str
    imported: int
    errors: List[str] = []
    execution_time: float = 0.0
