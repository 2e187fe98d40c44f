# gerador/application/dtos/documento_dto.py
from __future__ import annotations

from pydantic import BaseModel

from gerador.domain.documento.value_objects import DocumentoGerado, TipoDocumento


class DocumentoDTO(BaseModel):
    tipo: TipoDocumento
    valor: str
    formatado: str

    @classmethod
    def de_documento(cls, documento: DocumentoGerado) -> DocumentoDTO:
        return cls(tipo=documento.tipo, valor=documento.valor, formatado=documento.formatado)


class LoteDTO(BaseModel):
    tipo: TipoDocumento
    quantidade: int
    documentos: list[DocumentoDTO]
