# gerador/domain/documento/services.py
#
# Montagem de um documento completo a partir de digitos sorteados.
#
# Design decisions:
#   - A fonte de digitos e injetada (FonteDigitos) para que testes usem uma
#     sequencia fixa ou um Random com seed sem tocar no calculo.
#   - A fonte e consultada uma unica vez por documento. O segundo verificador
#     e calculado sobre base + primeiro verificador, nessa ordem.
#
# Invariants:
#   - O DocumentoGerado retornado tem sempre o comprimento final do tipo
#     (11 para CPF, 14 para CNPJ) e verificadores corretos.
from __future__ import annotations

from .fonte_digitos import FonteDigitos
from .value_objects import DocumentoGerado, SequenciaInvalidaError, TipoDocumento
from .verificador import calcular_digito_verificador


def gerar_documento(tipo: TipoDocumento, fonte: FonteDigitos) -> DocumentoGerado:
    """Sorteia os digitos base e acrescenta os dois verificadores."""
    base = list(fonte.gerar(tipo.qtd_digitos_base))
    if len(base) != tipo.qtd_digitos_base:
        raise SequenciaInvalidaError(
            f"Fonte devolveu {len(base)} digitos, esperado {tipo.qtd_digitos_base}"
        )

    primeiro = calcular_digito_verificador(base, tipo)
    segundo = calcular_digito_verificador([*base, primeiro], tipo)
    return DocumentoGerado(tipo=tipo, digitos=(*base, primeiro, segundo))
