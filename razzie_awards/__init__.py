"""
Golden Raspberry Awards API
Intervalo entre prêmios de produtores

Seguindo o padrão arquitetural do projeto:
- Importação da lista de filmes (CSV separado por ';')
- Armazenamento em memória dos registros
- Análise de intervalos entre vitórias consecutivas
- API FastAPI (deploy local ou Lambda)
"""

__version__ = "1.0.0"
__author__ = "Tech Challenge Team"
