"""
Configuração da aplicação

Variáveis de ambiente com prefixo TC_ (opcionalmente carregadas de um .env)
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

# Carregar variáveis de ambiente
load_dotenv()

DEFAULT_MOVIES_CSV = str(Path(__file__).parent / "assets" / "movielist.csv")


class Settings(BaseModel):
    stage: str = "dev"
    region: str = "us-east-1"
    movies_csv: str = DEFAULT_MOVIES_CSV
    csv_separator: str = ";"
    api_host: str = "0.0.0.0"
    api_port: int = 8000


def get_settings() -> Settings:
    """Lê as configurações do ambiente a cada chamada (sem cache)"""
    return Settings(
        stage=os.getenv("TC_STAGE", "dev"),
        region=os.getenv("TC_REGION", "us-east-1"),
        movies_csv=os.getenv("TC_MOVIES_CSV", DEFAULT_MOVIES_CSV),
        csv_separator=os.getenv("TC_CSV_SEPARATOR", ";"),
        api_host=os.getenv("TC_API_HOST", "0.0.0.0"),
        api_port=int(os.getenv("TC_API_PORT", "8000")),
    )
