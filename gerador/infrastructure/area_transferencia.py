# gerador/infrastructure/area_transferencia.py
#
# Copia de texto para a area de transferencia do sistema via comando externo.
#
# Design decisions:
#   - Nenhuma biblioteca de clipboard: cada plataforma ja traz um comando que
#     le o texto do stdin (pbcopy, wl-copy, xclip, xsel, clip).
#   - O primeiro comando encontrado no PATH e usado. Comando ausente, saida
#     diferente de zero ou timeout resultam em False e uma linha de log.
#     A falha nunca sobe como excecao: copiar e uma conveniencia e nao pode
#     interromper a geracao.
from __future__ import annotations

import shutil
import subprocess

from gerador.infrastructure.log import log

COMANDOS_PADRAO: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class ComandoAreaTransferencia:
    def __init__(
        self,
        comandos: tuple[tuple[str, ...], ...] = COMANDOS_PADRAO,
        timeout: float = 5.0,
    ) -> None:
        self._comandos = comandos
        self._timeout = timeout

    def _localizar(self) -> list[str] | None:
        for comando in self._comandos:
            executavel = shutil.which(comando[0])
            if executavel:
                return [executavel, *comando[1:]]
        return None

    def copiar(self, texto: str) -> bool:
        comando = self._localizar()
        if comando is None:
            log("Falha ao copiar: nenhum comando de area de transferencia disponivel")
            return False

        try:
            subprocess.run(
                comando,
                input=texto.encode("utf-8"),
                check=True,
                timeout=self._timeout,
                capture_output=True,
            )
        except (OSError, subprocess.SubprocessError) as err:
            log(f"Falha ao copiar com {comando[0]}: {err}")
            return False
        return True
