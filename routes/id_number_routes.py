"""
Router de FastAPI para la validación de números de identificación españoles
(NIF, NIE y CIF), individual o por lotes, y para la detección de
identificadores dentro de texto libre.
"""
from typing import List, Optional, Union

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from service.validation_service import (
    consultar_tipo_documento,
    detectar_identificadores,
    validar_documento,
    validar_lote_documentos,
)

#---------------------------------------------------------- Router
router = APIRouter(tags=["Documentos de identidad (NIF, NIE y CIF)"])


# Modelos de entrada
class DocumentoPayload(BaseModel):
    numero: str = Field(..., description="Número de documento (NIF, NIE o CIF)", examples=["12345678Z"])


class LoteDocumentosPayload(BaseModel):
    numeros: Optional[Union[List[str], str]] = Field(
        None,
        description="Lista de documentos, o cadena separada por comas, punto y coma o saltos de línea",
        examples=[["12345678Z", "X6089822C", "F43298256"]],
    )


class TextoPayload(BaseModel):
    texto: str = Field(..., description="Texto libre en el que buscar NIF, NIE, CIF e IBAN")


# ---------------------------------------------------------- Post - Validar un documento
@router.post("/validate_id_number", summary="Valida un NIF, NIE o CIF")
async def validate_id_number(
    payload: DocumentoPayload = Body(..., description="JSON con la clave 'numero'")
):
    """
    Clasifica el documento por su formato (NIF -> NIE -> CIF) y comprueba su
    carácter de control. Siempre responde 200; `valido` indica el resultado.
    """
    return JSONResponse(validar_documento(payload.numero))


# ---------------------------------------------------------- Post - Validar un lote
@router.post("/validate_id_numbers", summary="Valida un lote de documentos",
    description=(
        "Valida varios NIF/NIE/CIF en una sola llamada. "
        "Acepta una lista JSON, un array JSON embebido en una cadena o valores separados por comas."
    )
)
async def validate_id_numbers(
    payload: LoteDocumentosPayload = Body(..., description="JSON con la clave 'numeros'")
):
    return JSONResponse(validar_lote_documentos(payload.numeros))


# ---------------------------------------------------------- Post - Tipo de documento
@router.post("/id_type", summary="Describe el tipo de titular de un documento")
async def id_type(
    payload: DocumentoPayload = Body(..., description="JSON con la clave 'numero'")
):
    """
    Devuelve la descripción del titular según el carácter inicial del
    documento. Solo se comprueba el formato, no el carácter de control.
    """
    return JSONResponse(consultar_tipo_documento(payload.numero))


# ---------------------------------------------------------- Post - Detectar identificadores en texto
@router.post("/detect_identifiers_from_text", summary="Detecta y valida identificadores en texto plano",
    description=(
        "Busca NIF, NIE, CIF e IBAN en un texto, valida su control y devuelve "
        "el contexto de cada uno. Los identificadores con control incorrecto se "
        "reportan además en 'identificadores_invalidos'."
    )
)
async def detect_identifiers_from_text(
    payload: TextoPayload = Body(..., description="JSON con la clave 'texto'")
):
    return JSONResponse(detectar_identificadores(payload.texto))
