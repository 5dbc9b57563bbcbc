"""
Servicio de validación de identificadores (NIF/NIE/CIF, CCC, IBAN y AT-02).
Centraliza la lógica de negocio para mantener los endpoints limpios: los
validadores de `funcs.validadores` nunca lanzan excepciones, y aquí se decide
qué entradas no permiten construir una respuesta (HTTP 400).
"""
from typing import Any, Dict, List, Optional, Union

from fastapi import HTTPException

from core.config import settings
from core.logger import enmascarar, get_logger
from funcs.detectar_identificadores_texto import (
    detectar_identificadores_en_texto,
    filtrar_identificadores_invalidos,
)
from funcs.validadores.cuentas_bancarias import (
    obtener_digitos_control_cuenta,
    validar_cuenta_bancaria,
)
from funcs.validadores.documentos_identidad import (
    detectar_tipo_documento,
    normalizar_documento,
    obtener_tipo_identificacion,
    validar_numero_identificacion,
)
from funcs.validadores.iban import (
    es_pais_sepa,
    formatear_iban,
    normalizar_iban,
    obtener_digitos_control_iban,
    obtener_identificador_global,
    obtener_longitud_cuenta,
    validar_iban,
)
from service.identificadores_parser import parse_identificadores_input

logger = get_logger(__name__)


# ---------------------------------------------------------- Documentos de identidad
def validar_documento(numero: str) -> Dict[str, Any]:
    """
    Valida un NIF, NIE o CIF y devuelve el detalle del análisis.

    Returns:
        Diccionario con número original y normalizado, tipo detectado,
        descripción del titular, validez y carácter de control esperado
    """
    normalizado = normalizar_documento(numero)
    tipo = detectar_tipo_documento(normalizado)
    valido = validar_numero_identificacion(normalizado)

    esperado = tipo.calcular_digito_control(normalizado) if tipo else ""

    logger.debug("Documento %s -> tipo=%s valido=%s", enmascarar(normalizado),
                 tipo.etiqueta if tipo else None, valido)

    return {
        "numero": numero,
        "numero_normalizado": normalizado,
        "tipo": tipo.etiqueta if tipo else None,
        "descripcion": obtener_tipo_identificacion(normalizado),
        "valido": valido,
        "caracter_control_esperado": esperado or None,
    }


def validar_lote_documentos(numeros: Optional[Union[List[str], str]]) -> Dict[str, Any]:
    """
    Valida una lista de documentos (en cualquiera de los formatos admitidos
    por `parse_identificadores_input`) y añade un resumen.

    Raises:
        HTTPException: Si la lista está vacía o supera el máximo configurado
    """
    documentos = parse_identificadores_input(numeros)

    if not documentos:
        logger.warning("Lote de documentos rechazado: lista vacía")
        raise HTTPException(status_code=400, detail="Debes proporcionar al menos un número de documento")

    if len(documentos) > settings.max_documentos_lote:
        logger.warning("Lote de documentos rechazado: %d elementos (máximo %d)",
                       len(documentos), settings.max_documentos_lote)
        raise HTTPException(
            status_code=400,
            detail=f"El lote supera el máximo de {settings.max_documentos_lote} documentos"
        )

    logger.info("Validando lote de %d documentos", len(documentos))
    resultados = [validar_documento(numero) for numero in documentos]

    return _construir_respuesta(resultados)


def consultar_tipo_documento(numero: str) -> Dict[str, Any]:
    """
    Devuelve la descripción del tipo de titular (solo se comprueba el formato).
    """
    descripcion = obtener_tipo_identificacion(numero)
    return {
        "numero": numero,
        "descripcion": descripcion,
        "formato_valido": descripcion != "",
    }


# ---------------------------------------------------------- Cuentas bancarias (CCC)
def validar_cuenta(entidad: str, oficina: str, digitos_control: str, cuenta: str) -> Dict[str, Any]:
    """
    Valida una cuenta bancaria española y devuelve los dígitos esperados.
    """
    esperados = obtener_digitos_control_cuenta(entidad, oficina, cuenta)
    valido = validar_cuenta_bancaria(entidad, oficina, digitos_control, cuenta)

    logger.debug("Cuenta %s -> valido=%s", enmascarar(cuenta), valido)

    return {
        "entidad": entidad,
        "oficina": oficina,
        "digitos_control": digitos_control,
        "cuenta": cuenta,
        "valido": valido,
        "digitos_control_esperados": esperados or None,
    }


def calcular_digitos_cuenta(entidad: str, oficina: str, cuenta: str) -> Dict[str, Any]:
    """
    Calcula los dígitos de control de una cuenta bancaria.

    Raises:
        HTTPException: Si entidad, oficina o cuenta no tienen el formato esperado
    """
    digitos = obtener_digitos_control_cuenta(entidad, oficina, cuenta)
    if not digitos:
        logger.warning("Cálculo de dígitos de cuenta rechazado: formato inválido")
        raise HTTPException(
            status_code=400,
            detail="Entidad y oficina deben tener 4 dígitos y la cuenta 10 dígitos"
        )
    return {
        "digitos_control": digitos,
        "ccc": f"{entidad}{oficina}{digitos}{cuenta}",
    }


# ---------------------------------------------------------- IBAN
def validar_iban_detalle(iban: str) -> Dict[str, Any]:
    """
    Valida un IBAN (formato electrónico o impreso) y devuelve el detalle.
    """
    fijo = normalizar_iban(iban)
    codigo_pais = fijo[:2]
    valido = validar_iban(fijo)

    logger.debug("IBAN %s -> valido=%s", enmascarar(fijo), valido)

    return {
        "iban": iban,
        "iban_electronico": fijo,
        "iban_formateado": formatear_iban(fijo) if valido else None,
        "codigo_pais": codigo_pais,
        "pais_sepa": es_pais_sepa(codigo_pais),
        "longitud_esperada": obtener_longitud_cuenta(codigo_pais),
        "digitos_control_esperados": obtener_digitos_control_iban(fijo) or None,
        "valido": valido,
    }


def calcular_digitos_iban(iban: str) -> Dict[str, Any]:
    """
    Calcula los dígitos de control de un IBAN y devuelve el IBAN corregido.

    Raises:
        HTTPException: Si el país no es SEPA o la longitud no corresponde
    """
    fijo = normalizar_iban(iban)
    digitos = obtener_digitos_control_iban(fijo)
    if not digitos:
        logger.warning("Cálculo de dígitos IBAN rechazado para país '%s'", fijo[:2])
        raise HTTPException(
            status_code=400,
            detail="El IBAN no corresponde a un país SEPA o su longitud no es la esperada"
        )
    corregido = fijo[:2] + digitos + fijo[4:]
    return {
        "digitos_control": digitos,
        "iban": corregido,
        "iban_formateado": formatear_iban(corregido),
    }


def consultar_pais_sepa(codigo_pais: str) -> Dict[str, Any]:
    return {
        "codigo_pais": codigo_pais.strip().upper(),
        "longitud_iban": obtener_longitud_cuenta(codigo_pais),
        "pais_sepa": es_pais_sepa(codigo_pais),
    }


# ---------------------------------------------------------- Identificador global SEPA (AT-02)
def generar_identificador_global(id_local: str, codigo_pais: str, sufijo: str = "") -> Dict[str, Any]:
    """
    Genera el identificador de acreedor SEPA (AT-02).

    Raises:
        HTTPException: Si el código de país no son 2 letras o el identificador local está vacío
    """
    identificador = obtener_identificador_global(id_local, codigo_pais, sufijo)
    if not identificador:
        logger.warning("Identificador global rechazado para país '%s'", codigo_pais)
        raise HTTPException(
            status_code=400,
            detail="El código de país debe tener 2 letras y el identificador local no puede estar vacío"
        )
    logger.info("Identificador global generado para %s", enmascarar(id_local))
    return {
        "id_local": id_local,
        "codigo_pais": codigo_pais,
        "identificador_global": identificador,
    }


# ---------------------------------------------------------- Texto libre
def detectar_identificadores(texto: Optional[str]) -> Dict[str, Any]:
    """
    Detecta y valida los identificadores presentes en un texto.

    Raises:
        HTTPException: Si el texto está vacío
    """
    if not texto or len(texto.strip()) == 0:
        raise HTTPException(status_code=400, detail="El texto proporcionado está vacío")

    resultado = detectar_identificadores_en_texto(texto)
    logger.info(
        "Texto analizado: %d documentos y %d IBAN detectados",
        len(resultado["documentos"]), len(resultado["ibans"])
    )

    identificadores_invalidos = filtrar_identificadores_invalidos(resultado)

    response = {
        "resultados": resultado,
    }

    # Agregar identificadores inválidos si existen
    if any(identificadores_invalidos.values()):
        response["identificadores_invalidos"] = identificadores_invalidos

    # Resumen: contar identificadores por tipo
    response["resumen"] = {tipo: len(items) for tipo, items in resultado.items()}

    return response


def _construir_respuesta(resultados: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Construye la respuesta de un lote con el detalle y un resumen.

    Args:
        resultados: Detalle de cada documento validado

    Returns:
        Diccionario con resultados y resumen (total, válidos, inválidos)
    """
    validos = sum(1 for r in resultados if r["valido"])
    return {
        "resultados": resultados,
        "resumen": {
            "total": len(resultados),
            "validos": validos,
            "invalidos": len(resultados) - validos,
        },
    }
