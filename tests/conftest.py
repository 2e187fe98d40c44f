# tests/conftest.py
#
# Fixtures compartilhadas: fonte de digitos fixa e verificadores independentes
# do algoritmo da Receita, usados para conferir o que o gerador produz.
from __future__ import annotations

from collections.abc import Callable

import pytest


class FonteFixa:
    """Fonte de digitos que devolve sequencias pre-definidas, na ordem."""

    def __init__(self, *sequencias: list[int]) -> None:
        self._sequencias = list(sequencias)
        self.chamadas: list[int] = []

    def gerar(self, n: int) -> list[int]:
        self.chamadas.append(n)
        return self._sequencias.pop(0)


@pytest.fixture()
def fonte_fixa() -> Callable[..., FonteFixa]:
    return FonteFixa


def verificar_cpf(digitos: str) -> bool:
    """Algoritmo padrao da Receita, escrito de forma independente do gerador."""
    pesos_1 = [10, 9, 8, 7, 6, 5, 4, 3, 2]
    soma = sum(int(digitos[i]) * pesos_1[i] for i in range(9))
    resto = soma % 11
    d1 = 0 if resto < 2 else 11 - resto
    if int(digitos[9]) != d1:
        return False

    pesos_2 = [11, 10, 9, 8, 7, 6, 5, 4, 3, 2]
    soma = sum(int(digitos[i]) * pesos_2[i] for i in range(10))
    resto = soma % 11
    d2 = 0 if resto < 2 else 11 - resto
    return int(digitos[10]) == d2


def verificar_cnpj(digitos: str) -> bool:
    pesos_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    soma = sum(int(digitos[i]) * pesos_1[i] for i in range(12))
    resto = soma % 11
    d1 = 0 if resto < 2 else 11 - resto
    if int(digitos[12]) != d1:
        return False

    pesos_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    soma = sum(int(digitos[i]) * pesos_2[i] for i in range(13))
    resto = soma % 11
    d2 = 0 if resto < 2 else 11 - resto
    return int(digitos[13]) == d2


@pytest.fixture()
def verificadores() -> dict[str, Callable[[str], bool]]:
    return {"CPF": verificar_cpf, "CNPJ": verificar_cnpj}
