"""
API Golden Raspberry Awards
Intervalo entre prêmios de produtores

API para consulta dos indicados e dos produtores com menor e maior
intervalo entre vitórias consecutivas
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Dict, List, Optional
import logging
from datetime import datetime

from .. import __version__
from ..config import get_settings
from ..data_pipeline.ingest_movies import MovieFileNotFoundError
from ..models import ImportSummary, IntervalReport, Movie
from ..services.awards_service import AwardsService
from ..storage.movie_repository import MovieRepository

# Configuração de logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Inicialização da API
app = FastAPI(
    title="Golden Raspberry Awards API",
    description="API para análise dos vencedores da categoria Pior Filme",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

repository = MovieRepository()
service = AwardsService(repository)

# === MODELOS PYDANTIC ===

class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str

class ImportRequest(BaseModel):
    source: Optional[str] = None  # caminho local ou s3://bucket/key
    replace: bool = True

# === ENDPOINTS ===

@app.get("/", response_model=Dict[str, str])
async def root():
    """Endpoint raiz da API"""
    return {
        "message": "Golden Raspberry Awards API",
        "docs": "/docs",
        "health": "/healthz",
        "version": __version__
    }

@app.get("/healthz", response_model=HealthResponse)
async def health_check():
    """Health check da API"""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version=__version__,
        environment=get_settings().stage
    )

@app.get("/list-all", response_model=List[Movie])
async def list_all():
    """Todos os filmes importados, ordenados por ano"""
    try:
        return service.find_all()
    except Exception as e:
        logger.error(f"Erro ao listar filmes: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

@app.get("/find-gra-worst-winners", response_model=IntervalReport)
async def find_worst_winners():
    """
    Produtores com menor e maior intervalo entre dois prêmios consecutivos

    Retorna todas as ocorrências empatadas em cada extremo
    """
    try:
        return service.find_worst_winners()
    except Exception as e:
        logger.error(f"Erro na análise: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

@app.post("/v1/movies/import", response_model=ImportSummary)
def import_movies(request: ImportRequest):
    """
    Reimporta a lista de filmes (CSV local ou S3)

    Linhas inválidas são ignoradas e retornadas em `errors`
    """
    try:
        logger.info(f"Iniciando importação: {request.model_dump()}")
        return service.import_movies(request.source, replace=request.replace)
    except MovieFileNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Erro na importação: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Erro na importação: {str(e)}")

# === STARTUP EVENTS ===

@app.on_event("startup")
async def startup_event():
    """Inicialização da API: importa a lista de filmes configurada"""
    settings = get_settings()
    logger.info("🚀 Iniciando Golden Raspberry Awards API")
    logger.info(f"Environment: {settings.stage}")

    repository.clear()
    try:
        service.import_movies(settings.movies_csv)
    except MovieFileNotFoundError as e:
        logger.error(f"❌ {e} ({e.source}) - API iniciada sem filmes")

@app.on_event("shutdown")
async def shutdown_event():
    """Finalização da API"""
    logger.info("🔄 Finalizando Golden Raspberry Awards API")

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "razzie_awards.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True
    )
