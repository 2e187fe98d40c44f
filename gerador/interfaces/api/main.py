# gerador/interfaces/api/main.py
from __future__ import annotations

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from gerador.infrastructure.config import get_settings
from gerador.interfaces.api.middleware.rate_limit import RateLimitMiddleware
from gerador.interfaces.api.routes.documento_routes import router as documento_router

app = FastAPI(
    title="Gerador de Documentos",
    description="CPF e CNPJ validos para testes.",
    debug=get_settings().debug,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    # documentos sorteados nunca devem ser reaproveitados de cache
    response.headers["Cache-Control"] = "no-store"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/api/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(documento_router, prefix="/api")
