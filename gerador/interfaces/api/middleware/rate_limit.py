# gerador/interfaces/api/middleware/rate_limit.py
#
# Limite de documentos gerados por IP em uma janela deslizante de 60 s.
#
# Design decisions:
#   - A cota e medida em documentos, nao em requests: /api/documentos/{tipo}
#     consome `quantidade` unidades, /api/cpf e /api/cnpj consomem 1. Demais
#     rotas (health, docs) nao consomem cota.
#   - Um lote que nao cabe no saldo restante e recusado inteiro (429), nunca
#     atendido parcialmente.
#   - Quantidade ausente ou nao numerica conta como 1; a rota devolve 422 e o
#     custo minimo impede que requests invalidos escapem do limite.
#
# Invariants:
#   - API_RATE_LIMIT_PER_MINUTE == 0 desliga o limite (usado em testes).
#   - Header X-API-Key ignora o limite.
#   - Um IP sem consumo na janela nao ocupa entrada em _consumo.
from __future__ import annotations

import time
from collections import defaultdict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from gerador.infrastructure.config import get_settings

JANELA_SEGUNDOS = 60.0

_ROTAS_UNITARIAS = ("/api/cpf", "/api/cnpj")
_PREFIXO_LOTE = "/api/documentos/"


def custo_da_request(request: Request) -> int:
    """Quantos documentos a request vai gerar (0 para rotas que nao geram)."""
    path = request.url.path.rstrip("/")
    if path in _ROTAS_UNITARIAS:
        return 1
    if path.startswith(_PREFIXO_LOTE):
        try:
            return max(1, int(request.query_params.get("quantidade", "1")))
        except ValueError:
            return 1
    return 0


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        # ip -> [(instante, documentos)]
        self._consumo: dict[str, list[tuple[float, int]]] = defaultdict(list)

    def _consumo_recente(self, client_ip: str, agora: float) -> list[tuple[float, int]]:
        recentes = [
            (t, n) for t, n in self._consumo.get(client_ip, []) if agora - t < JANELA_SEGUNDOS
        ]
        if recentes:
            self._consumo[client_ip] = recentes
        else:
            self._consumo.pop(client_ip, None)
        return recentes

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        limite = get_settings().rate_limit_per_minute
        custo = custo_da_request(request)

        if limite == 0 or custo == 0 or request.headers.get("X-API-Key"):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        agora = time.time()
        usados = sum(n for _, n in self._consumo_recente(client_ip, agora))

        if usados + custo > limite:
            return Response(
                content=(
                    '{"detail": "Limite de documentos gerados por minuto excedido. '
                    'Tente novamente em 1 minuto."}'
                ),
                status_code=429,
                media_type="application/json",
            )

        self._consumo[client_ip].append((agora, custo))
        return await call_next(request)
