# gerador/domain/documento/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TipoDocumento(StrEnum):
    CPF = "CPF"    # Cadastro de Pessoas Fisicas
    CNPJ = "CNPJ"  # Cadastro Nacional da Pessoa Juridica

    @property
    def qtd_digitos_base(self) -> int:
        """Digitos sorteados antes dos dois verificadores."""
        return 9 if self is TipoDocumento.CPF else 12

    @property
    def qtd_digitos(self) -> int:
        return self.qtd_digitos_base + 2


class SequenciaInvalidaError(ValueError):
    """Sequencia de digitos incompativel com o tipo de documento ou etapa."""


def formatar(digitos: tuple[int, ...] | list[int], tipo: TipoDocumento) -> str:
    """Aplica a mascara fixa do tipo: XXX.XXX.XXX-XX ou XX.XXX.XXX/XXXX-XX."""
    if len(digitos) != tipo.qtd_digitos:
        raise SequenciaInvalidaError(
            f"{tipo} invalido: comprimento {len(digitos)}, esperado {tipo.qtd_digitos}"
        )
    d = "".join(str(x) for x in digitos)
    if tipo is TipoDocumento.CPF:
        return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"
    return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"


@dataclass(frozen=True)
class DocumentoGerado:
    """Value Object imutavel para um CPF/CNPJ recem-gerado.

    Nao valida digitos verificadores: quem monta o objeto (gerar_documento)
    ja os calculou. Garante apenas o comprimento final do tipo.
    """

    tipo: TipoDocumento
    digitos: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.digitos) != self.tipo.qtd_digitos:
            raise SequenciaInvalidaError(
                f"{self.tipo} invalido: comprimento {len(self.digitos)}, "
                f"esperado {self.tipo.qtd_digitos}"
            )

    @property
    def valor(self) -> str:
        """Digitos sem formatacao."""
        return "".join(str(d) for d in self.digitos)

    @property
    def formatado(self) -> str:
        return formatar(self.digitos, self.tipo)

    @property
    def base(self) -> tuple[int, ...]:
        return self.digitos[:-2]

    @property
    def verificadores(self) -> tuple[int, int]:
        return self.digitos[-2], self.digitos[-1]

    def __repr__(self) -> str:
        return f"DocumentoGerado({self.tipo}, {self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado
