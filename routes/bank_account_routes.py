"""
Router de FastAPI para cuentas bancarias: CCC española, IBAN, países SEPA e
identificador global de acreedor SEPA (AT-02).
"""
from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from service.validation_service import (
    calcular_digitos_cuenta,
    calcular_digitos_iban,
    consultar_pais_sepa,
    generar_identificador_global,
    validar_cuenta,
    validar_iban_detalle,
)

#---------------------------------------------------------- Router
router = APIRouter(tags=["Cuentas bancarias (CCC, IBAN y SEPA)"])


# Modelos de entrada
class CuentaPayload(BaseModel):
    entidad: str = Field(..., description="Código de entidad (4 dígitos)", examples=["2100"])
    oficina: str = Field(..., description="Código de oficina (4 dígitos)", examples=["0418"])
    cuenta: str = Field(..., description="Número de cuenta (10 dígitos)", examples=["0200051332"])


class CuentaConDigitosPayload(CuentaPayload):
    digitos_control: str = Field(..., description="Dígitos de control (2 dígitos)", examples=["45"])


class IbanPayload(BaseModel):
    iban: str = Field(..., description="IBAN en formato electrónico o impreso", examples=["ES91 2100 0418 4502 0005 1332"])


class IdentificadorGlobalPayload(BaseModel):
    id_local: str = Field(..., description="Identificador local (ej: CIF del acreedor)", examples=["G28667152"])
    codigo_pais: str = Field(..., description="Código ISO del país (2 letras)", examples=["ES"])
    sufijo: str = Field("", description="Sufijo comercial (hasta 3 dígitos)")


# ---------------------------------------------------------- Post - Cuenta bancaria (CCC)
@router.post("/validate_account_number", summary="Valida una cuenta bancaria española (CCC)")
async def validate_account_number(
    payload: CuentaConDigitosPayload = Body(..., description="Entidad, oficina, dígitos de control y cuenta")
):
    return JSONResponse(validar_cuenta(payload.entidad, payload.oficina, payload.digitos_control, payload.cuenta))


@router.post("/account_check_digits", summary="Calcula los dígitos de control de una CCC")
async def account_check_digits(
    payload: CuentaPayload = Body(..., description="Entidad, oficina y cuenta")
):
    return JSONResponse(calcular_digitos_cuenta(payload.entidad, payload.oficina, payload.cuenta))


# ---------------------------------------------------------- Post - IBAN
@router.post("/validate_iban", summary="Valida un IBAN")
async def validate_iban(
    payload: IbanPayload = Body(..., description="JSON con la clave 'iban'")
):
    """
    Comprueba país SEPA, longitud del país y dígitos de control (módulo 97).
    Siempre responde 200; `valido` indica el resultado.
    """
    return JSONResponse(validar_iban_detalle(payload.iban))


@router.post("/iban_check_digits", summary="Calcula los dígitos de control de un IBAN")
async def iban_check_digits(
    payload: IbanPayload = Body(..., description="IBAN con los dígitos de control a 00 o cualesquiera")
):
    return JSONResponse(calcular_digitos_iban(payload.iban))


# ---------------------------------------------------------- Get - País SEPA
@router.get("/sepa_country/{codigo_pais}", summary="Longitud del IBAN y pertenencia a SEPA de un país")
async def sepa_country(codigo_pais: str):
    return JSONResponse(consultar_pais_sepa(codigo_pais))


# ---------------------------------------------------------- Post - Identificador global (AT-02)
@router.post("/global_identifier", summary="Genera el identificador de acreedor SEPA (AT-02)")
async def global_identifier(
    payload: IdentificadorGlobalPayload = Body(..., description="Identificador local, país y sufijo")
):
    return JSONResponse(generar_identificador_global(payload.id_local, payload.codigo_pais, payload.sufijo))
