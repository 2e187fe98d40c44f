# gerador/infrastructure/log.py
#
# Logger compartilhado com tempo decorrido.
#
# Design decisions:
#   - Uma unica funcao log() para CLI e infraestrutura. Hoje registra as
#     falhas de copia (comando de area de transferencia ausente, erro ou
#     timeout) e o aviso da CLI quando o documento foi gerado mas nao copiado.
#   - Nunca recebe o documento gerado: as mensagens citam apenas o tipo e o
#     comando, para que o log nao vire uma segunda saida de dados.
#   - Escreve em stderr: o stdout da CLI carrega apenas os documentos gerados,
#     para poder ser redirecionado para arquivo.
#   - O prefixo [gerador MM:SS] separa estas linhas das mensagens de erro do
#     argparse no mesmo stderr.
#   - Sem dependencias externas, flush imediato.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stderr."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stderr.write(f"[gerador {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stderr.flush()
