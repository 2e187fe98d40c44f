# gerador/domain/documento/fonte_digitos.py
from __future__ import annotations

import random
from typing import Protocol


class FonteDigitos(Protocol):
    def gerar(self, n: int) -> list[int]: ...


class FonteAleatoria:
    """Sorteia digitos uniformes em [0, 9] com random.Random.

    Nao e criptograficamente segura: os numeros servem apenas como massa de
    teste. Com seed fixa a sequencia e reproduzivel.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def gerar(self, n: int) -> list[int]:
        if n < 1:
            raise ValueError(f"Quantidade de digitos deve ser positiva, recebido {n}")
        return [self._rng.randrange(10) for _ in range(n)]
