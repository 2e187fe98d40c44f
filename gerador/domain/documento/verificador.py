# gerador/domain/documento/verificador.py
#
# Calculo dos digitos verificadores de CPF e CNPJ (modulo 11).
#
# Design decisions:
#   - Uma unica entrada publica, calcular_digito_verificador(digitos, tipo),
#     serve as duas passagens: a primeira recebe so os digitos base e a
#     segunda recebe base + primeiro verificador.
#   - O comprimento da entrada e validado. Uma sequencia fora da etapa
#     esperada levanta SequenciaInvalidaError em vez de produzir um digito
#     errado.
#
# Invariants:
#   - Funcao pura: mesma sequencia + mesmo tipo sempre dao o mesmo digito.
#   - O resultado esta sempre em [0, 9].
from __future__ import annotations

from collections.abc import Sequence

from .value_objects import SequenciaInvalidaError, TipoDocumento

PESOS_CNPJ = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
PESO_EXTRA_CNPJ = 6


def _validar(digitos: Sequence[int], tipo: TipoDocumento) -> None:
    esperados = (tipo.qtd_digitos_base, tipo.qtd_digitos_base + 1)
    if len(digitos) not in esperados:
        raise SequenciaInvalidaError(
            f"{tipo}: comprimento {len(digitos)}, esperado {esperados[0]} ou {esperados[1]}"
        )
    for d in digitos:
        # bool e subclasse de int, mas nunca e um digito
        if isinstance(d, bool) or not isinstance(d, int) or not 0 <= d <= 9:
            raise SequenciaInvalidaError(f"{tipo}: elemento fora de [0, 9]: {d!r}")


def _verificador_cpf(digitos: Sequence[int]) -> int:
    n = len(digitos)
    soma = sum(d * (n + 1 - i) for i, d in enumerate(digitos))
    resto = (soma * 10) % 11
    return 0 if resto == 10 else resto


def _verificador_cnpj(digitos: Sequence[int]) -> int:
    pesos = PESOS_CNPJ if len(digitos) == 12 else (PESO_EXTRA_CNPJ, *PESOS_CNPJ)
    soma = sum(d * p for d, p in zip(digitos, pesos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def calcular_digito_verificador(digitos: Sequence[int], tipo: TipoDocumento) -> int:
    """Calcula o proximo digito verificador da sequencia.

    Args:
        digitos: 9 ou 10 digitos para CPF; 12 ou 13 para CNPJ.
        tipo:    Tipo de documento, que define a tabela de pesos.

    Returns:
        Digito verificador em [0, 9].

    Raises:
        SequenciaInvalidaError: comprimento incompativel com o tipo ou
            elemento que nao seja um inteiro entre 0 e 9.
    """
    _validar(digitos, tipo)
    if tipo is TipoDocumento.CPF:
        return _verificador_cpf(digitos)
    return _verificador_cnpj(digitos)
