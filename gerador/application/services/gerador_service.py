# gerador/application/services/gerador_service.py
from __future__ import annotations

from gerador.domain.documento.fonte_digitos import FonteAleatoria, FonteDigitos
from gerador.domain.documento.services import gerar_documento
from gerador.domain.documento.value_objects import DocumentoGerado, TipoDocumento


class GeradorService:
    def __init__(self, fonte: FonteDigitos, max_lote: int = 100) -> None:
        self._fonte = fonte
        self._max_lote = max_lote

    def gerar(self, tipo: TipoDocumento) -> DocumentoGerado:
        return gerar_documento(tipo, self._fonte)

    def gerar_cpf(self) -> str:
        """CPF formatado: XXX.XXX.XXX-XX"""
        return self.gerar(TipoDocumento.CPF).formatado

    def gerar_cnpj(self) -> str:
        """CNPJ formatado: XX.XXX.XXX/XXXX-XX"""
        return self.gerar(TipoDocumento.CNPJ).formatado

    def gerar_lote(self, tipo: TipoDocumento, quantidade: int) -> list[DocumentoGerado]:
        if not 1 <= quantidade <= self._max_lote:
            raise ValueError(
                f"Quantidade deve estar entre 1 e {self._max_lote}, recebido {quantidade}"
            )
        return [self.gerar(tipo) for _ in range(quantidade)]


_padrao = GeradorService(FonteAleatoria())


def gerar_cpf() -> str:
    return _padrao.gerar_cpf()


def gerar_cnpj() -> str:
    return _padrao.gerar_cnpj()
