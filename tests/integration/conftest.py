# tests/integration/conftest.py
#
# TestClient da API com rate limit desligado.
from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"


@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com settings recarregadas do ambiente."""
    from gerador.infrastructure.config import get_settings
    get_settings.cache_clear()

    from gerador.interfaces.api.dependencies import get_fonte_digitos
    get_fonte_digitos.cache_clear()

    from gerador.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
