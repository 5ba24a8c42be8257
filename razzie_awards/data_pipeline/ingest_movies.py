"""
Movie List Ingester
Golden Raspberry Awards

Pipeline de importação: CSV (local ou S3) → validação → repositório
Formato: year;title;studios;producers;winner
"""

import logging
import os
from datetime import datetime
from io import StringIO
from typing import Dict, List, Optional
from urllib.parse import urlparse

import boto3
import pandas as pd

from ..config import get_settings
from ..models import ImportSummary
from ..storage.movie_repository import MovieRepository

logger = logging.getLogger(__name__)

FILE_NOT_FOUND_MESSAGE = "Sorry! File not found."
REQUIRED_COLUMNS = ["year", "title", "studios", "producers"]
FIELD_COUNT_COLUMN = "__field_count__"


class MovieFileNotFoundError(FileNotFoundError):
    """Lista de filmes inexistente (local ou S3)"""

    def __init__(self, source: str):
        super().__init__(FILE_NOT_FOUND_MESSAGE)
        self.source = source


def _field_count(values) -> int:
    """Quantidade de campos até o último preenchido"""
    filled = [position for position, value in enumerate(values) if value]
    return filled[-1] + 1 if filled else 0


class MovieIngester:
    """
    Classe para importação da lista de filmes
    CSV → validação por linha → MovieRepository
    """

    def __init__(self, repository: MovieRepository, separator: Optional[str] = None):
        self.repository = repository
        self.separator = separator or get_settings().csv_separator
        self._s3_client = None

    @property
    def s3_client(self):
        # Criado só quando a origem é S3
        if self._s3_client is None:
            self._s3_client = boto3.client("s3", region_name=get_settings().region)
        return self._s3_client

    def import_movies(self, source: str, replace: bool = False) -> ImportSummary:
        """
        Importa a lista de filmes para o repositório

        Linhas inválidas são ignoradas e os erros são registrados no log,
        sem interromper a importação.

        Args:
            source: Caminho local ou URI s3://bucket/key
            replace: Se deve limpar o repositório antes de importar

        Returns:
            ImportSummary com quantidade importada e erros encontrados

        Raises:
            MovieFileNotFoundError: Se o arquivo não existir
        """
        logger.info(f"🚀 Iniciando importação: {source}")
        start_time = datetime.now()

        df = self._read_movielist(source)

        if replace:
            self.repository.clear()

        imported = 0
        errors: List[str] = []
        expected_fields = len(df.columns) - 1

        for index, row in enumerate(df.to_dict(orient="records"), start=1):
            field_count = row.pop(FIELD_COUNT_COLUMN)
            if field_count > expected_fields:
                errors.append(
                    f"Sorry! There is some error on the line {index}: expected {expected_fields} fields, saw {field_count}"
                )
                continue

            errors_found = self.validate_row(row, index)

            if errors_found:
                errors.extend(errors_found)
                continue

            self.repository.create(self._to_document(row))
            imported += 1

        if errors:
            logger.warning(errors)

        execution_time = (datetime.now() - start_time).total_seconds()
        logger.info(f"✅ Importação concluída em {execution_time:.2f}s: {imported} filmes, {len(errors)} erros")

        return ImportSummary(
            source=source,
            imported=imported,
            errors=errors,
            execution_time=execution_time,
        )

    def _read_movielist(self, source: str) -> pd.DataFrame:
        """
        Lê o CSV (local ou S3) com todas as colunas como texto

        O cabeçalho é lido como uma linha comum, com colunas suficientes para
        a linha mais longa, assim linhas com campos a mais não interrompem a
        leitura. FIELD_COUNT_COLUMN guarda quantos campos cada linha tem,
        ignorando separadores no fim da linha.
        """
        text = self._read_text(source)

        if not text.strip():
            logger.warning(f"⚠️ Arquivo vazio: {source}")
            return pd.DataFrame(columns=[FIELD_COUNT_COLUMN])

        width = max(line.count(self.separator) for line in text.splitlines()) + 1

        raw = pd.read_csv(
            StringIO(text),
            sep=self.separator,
            header=None,
            names=list(range(width)),
            index_col=False,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
        # Linhas com menos campos vêm como NaN
        raw = raw.fillna("")
        for column in raw.columns:
            raw[column] = raw[column].astype(str).str.strip()

        header = list(raw.iloc[0])
        while header and not header[-1]:
            header.pop()

        data = raw.iloc[1:]
        df = data.iloc[:, :len(header)].copy()
        df.columns = header
        df[FIELD_COUNT_COLUMN] = [_field_count(values) for values in data.itertuples(index=False)]
        df = df[df[FIELD_COUNT_COLUMN] > 0]

        logger.info(f"Arquivo carregado: {len(df)} registros, {len(header)} colunas")
        return df

    def _read_text(self, source: str) -> str:
        if source.startswith("s3://"):
            return self._download_from_s3(source).decode("utf-8-sig")

        if not os.path.isfile(source):
            logger.error(f"❌ Arquivo não encontrado: {source}")
            raise MovieFileNotFoundError(source)

        with open(source, encoding="utf-8-sig") as f:
            return f.read()

    def _download_from_s3(self, source: str) -> bytes:
        """Baixa o objeto s3://bucket/key"""
        parsed = urlparse(source)
        bucket, key = parsed.netloc, parsed.path.lstrip("/")

        logger.info(f"📥 Baixando s3://{bucket}/{key}")

        try:
            obj = self.s3_client.get_object(Bucket=bucket, Key=key)
        except self.s3_client.exceptions.NoSuchKey:
            logger.error(f"❌ Objeto não encontrado: {source}")
            raise MovieFileNotFoundError(source)

        return obj["Body"].read()

    @staticmethod
    def validate_row(row: Dict[str, str], index: int) -> List[str]:
        """
        Valida uma linha do CSV

        Args:
            row: Valores da linha (já sem espaços nas pontas)
            index: Número da linha de dados (começando em 1)

        Returns:
            Lista de mensagens de erro (vazia se a linha for válida)
        """
        errors_found = []

        for column in REQUIRED_COLUMNS:
            if not row.get(column):
                errors_found.append(
                    f'Sorry! There is some error on the line {index}: "{column}" is required'
                )

        if errors_found:
            return errors_found

        try:
            int(row["year"])
        except ValueError:
            errors_found.append(
                f'Sorry! There is some error on the line {index}: "year" must be a number'
            )

        return errors_found

    @staticmethod
    def _to_document(row: Dict[str, str]) -> Dict:
        return {
            "year": int(row["year"]),
            "title": row["title"],
            "studios": row["studios"],
            "producers": row["producers"],
            "winner": row.get("winner", "").lower() == "yes",
        }
