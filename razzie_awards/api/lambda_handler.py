"""
Lambda Handler para FastAPI

Deploy da API via Lambda usando Mangum
lifespan="auto" para que a lista de filmes seja importada no startup
"""

from mangum import Mangum
from .main import app

# Handler para AWS Lambda
handler = Mangum(app, lifespan="auto")

# Para compatibilidade com diferentes versões
lambda_handler = handler
