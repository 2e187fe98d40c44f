# gerador/interfaces/api/dependencies.py
from functools import lru_cache

from gerador.application.services.gerador_service import GeradorService
from gerador.domain.documento.fonte_digitos import FonteAleatoria
from gerador.infrastructure.config import get_settings


@lru_cache(maxsize=1)
def get_fonte_digitos() -> FonteAleatoria:
    # Compartilhada entre requests: com GERADOR_SEED a sequencia avanca em vez
    # de repetir o mesmo documento a cada chamada.
    return FonteAleatoria(seed=get_settings().seed)


def get_gerador_service() -> GeradorService:
    return GeradorService(fonte=get_fonte_digitos(), max_lote=get_settings().max_lote)
