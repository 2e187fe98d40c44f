# gerador/domain/area_transferencia/protocol.py
from __future__ import annotations

from typing import Protocol


class AreaTransferencia(Protocol):
    def copiar(self, texto: str) -> bool: ...
