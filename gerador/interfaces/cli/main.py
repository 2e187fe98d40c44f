# gerador/interfaces/cli/main.py
#
# Linha de comando: gera CPFs/CNPJs e opcionalmente copia o ultimo.
#
# Design decisions:
#   - stdout recebe somente os documentos, um por linha. Mensagens de copia
#     vao para stderr via log() ou print(file=sys.stderr).
#   - Falha ao copiar nao altera o codigo de saida: o documento ja foi gerado
#     e impresso.
from __future__ import annotations

import argparse
import sys

from gerador.application.services.gerador_service import GeradorService
from gerador.application.services.sessao_service import SessaoGerador
from gerador.domain.area_transferencia.protocol import AreaTransferencia
from gerador.domain.documento.fonte_digitos import FonteAleatoria
from gerador.domain.documento.value_objects import TipoDocumento
from gerador.infrastructure.area_transferencia import ComandoAreaTransferencia
from gerador.infrastructure.config import get_settings
from gerador.infrastructure.log import log


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="gerador-documentos",
        description="Gera CPF e CNPJ validos para testes.",
    )
    ap.add_argument("tipo", choices=["cpf", "cnpj"], help="tipo de documento")
    ap.add_argument("-n", "--quantidade", type=int, default=1, help="quantos documentos gerar")
    ap.add_argument("--sem-formatacao", action="store_true", help="imprime apenas os digitos")
    ap.add_argument("--copiar", action="store_true", help="copia o ultimo documento gerado")
    ap.add_argument("--seed", type=int, default=None, help="seed do sorteio (reproduzivel)")
    return ap


def main(
    argv: list[str] | None = None,
    area_transferencia: AreaTransferencia | None = None,
) -> int:
    settings = get_settings()
    ap = _build_parser()
    args = ap.parse_args(argv)

    if not 1 <= args.quantidade <= settings.max_lote:
        ap.error(f"--quantidade deve estar entre 1 e {settings.max_lote}")

    seed = args.seed if args.seed is not None else settings.seed
    sessao = SessaoGerador(
        gerador=GeradorService(FonteAleatoria(seed=seed), max_lote=settings.max_lote),
        area_transferencia=area_transferencia
        or ComandoAreaTransferencia(timeout=settings.clipboard_timeout),
    )
    tipo = TipoDocumento(args.tipo.upper())

    for _ in range(args.quantidade):
        print(sessao.gerar(tipo, formatado=not args.sem_formatacao))

    if args.copiar:
        if sessao.copiar(tipo):
            print("Copiado!", file=sys.stderr)
        else:
            log(f"{tipo} gerado mas nao copiado")
    return 0


if __name__ == "__main__":
    sys.exit(main())
