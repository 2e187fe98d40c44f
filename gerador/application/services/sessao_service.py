# gerador/application/services/sessao_service.py
#
# Estado de uma sessao interativa: o ultimo documento gerado de cada tipo e a
# confirmacao temporaria de copia.
#
# Design decisions:
#   - A confirmacao de copia expira sozinha: copiado() compara o relogio atual
#     com o instante da ultima copia bem-sucedida, sem timers em segundo plano.
#   - O relogio e injetavel (default time.monotonic) para testes sem sleep.
#   - Gerar um novo documento apaga a confirmacao daquele tipo.
#   - A janela de 2 s e estado de apresentacao: fica como default do
#     construtor, fora da configuracao por ambiente. Quem desenha a tela
#     consulta copiado() para decidir entre "Copiar" e "Copiado!".
#
# Invariants:
#   - copiar() com valor atual vazio retorna False e nao chama a area de
#     transferencia.
#   - Uma copia que falhou nunca marca o tipo como copiado.
from __future__ import annotations

import time
from collections.abc import Callable

from gerador.application.services.gerador_service import GeradorService
from gerador.domain.area_transferencia.protocol import AreaTransferencia
from gerador.domain.documento.value_objects import TipoDocumento


class SessaoGerador:
    def __init__(
        self,
        gerador: GeradorService,
        area_transferencia: AreaTransferencia,
        janela_copia: float = 2.0,
        relogio: Callable[[], float] = time.monotonic,
    ) -> None:
        self._gerador = gerador
        self._area_transferencia = area_transferencia
        self._janela_copia = janela_copia
        self._relogio = relogio
        self._atual: dict[TipoDocumento, str] = {}
        self._copiado_em: dict[TipoDocumento, float] = {}

    def gerar(self, tipo: TipoDocumento, *, formatado: bool = True) -> str:
        documento = self._gerador.gerar(tipo)
        texto = documento.formatado if formatado else documento.valor
        self._atual[tipo] = texto
        self._copiado_em.pop(tipo, None)
        return texto

    def atual(self, tipo: TipoDocumento) -> str:
        return self._atual.get(tipo, "")

    def copiar(self, tipo: TipoDocumento) -> bool:
        texto = self.atual(tipo)
        if not texto:
            return False
        if not self._area_transferencia.copiar(texto):
            return False
        self._copiado_em[tipo] = self._relogio()
        return True

    def copiado(self, tipo: TipoDocumento) -> bool:
        copiado_em = self._copiado_em.get(tipo)
        if copiado_em is None:
            return False
        return self._relogio() - copiado_em < self._janela_copia
