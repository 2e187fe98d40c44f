# gerador/interfaces/api/routes/documento_routes.py
from fastapi import APIRouter, Depends, HTTPException, Query

from gerador.application.dtos.documento_dto import DocumentoDTO, LoteDTO
from gerador.application.services.gerador_service import GeradorService
from gerador.domain.documento.value_objects import TipoDocumento
from gerador.interfaces.api.dependencies import get_gerador_service

router = APIRouter()


@router.get("/cpf", response_model=DocumentoDTO)
def gerar_cpf(
    service: GeradorService = Depends(get_gerador_service),  # noqa: B008
) -> DocumentoDTO:
    return DocumentoDTO.de_documento(service.gerar(TipoDocumento.CPF))


@router.get("/cnpj", response_model=DocumentoDTO)
def gerar_cnpj(
    service: GeradorService = Depends(get_gerador_service),  # noqa: B008
) -> DocumentoDTO:
    return DocumentoDTO.de_documento(service.gerar(TipoDocumento.CNPJ))


@router.get("/documentos/{tipo_raw}", response_model=LoteDTO)
def gerar_lote(
    tipo_raw: str,
    quantidade: int = Query(default=1),
    service: GeradorService = Depends(get_gerador_service),  # noqa: B008
) -> LoteDTO:
    try:
        tipo = TipoDocumento(tipo_raw.upper())
    except ValueError as err:
        raise HTTPException(status_code=422, detail="Tipo de documento invalido") from err

    try:
        documentos = service.gerar_lote(tipo, quantidade)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err

    return LoteDTO(
        tipo=tipo,
        quantidade=len(documentos),
        documentos=[DocumentoDTO.de_documento(d) for d in documentos],
    )
