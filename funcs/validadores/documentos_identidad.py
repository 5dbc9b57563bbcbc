"""
Validadores de números de identificación españoles (NIF, NIE y CIF).

Implementa la normalización común, la comprobación de formato por patrón y
el cálculo de los caracteres de control:
- NIF: letra por módulo 23 (Ministerio del Interior)
- NIE: igual que el NIF tras sustituir X/Y/Z por 0/1/2
- CIF: dígito o letra de control (BOE número 49, 26/02/2008, artículo 2)

Ninguna función lanza excepciones ante entradas mal formadas: devuelven
False o cadena vacía.
"""
import re
from enum import Enum
from typing import Optional

from funcs.validadores.constantes import (
    DIGITOS,
    DIGITO_INICIAL_NIE,
    LETRAS_CIF,
    LETRAS_NIF,
    LONGITUD_DOCUMENTO,
    PATRON_CIF_DIGITO,
    PATRON_CIF_LETRA,
    PATRON_NIE,
    PATRON_NIF,
    TIPOS_CIF_CON_LETRA,
    TIPOS_IDENTIFICACION,
)
from funcs.validadores.utilidades import sumar_digitos


class TipoDocumento(Enum):
    """
    Variantes estructurales de un número de identificación.
    Cada una conoce su patrón y su calculador de carácter de control.
    """
    NIF = ("NIF", PATRON_NIF)
    NIE = ("NIE", PATRON_NIE)
    CIF_LETRA = ("CIF", PATRON_CIF_LETRA)
    CIF_DIGITO = ("CIF", PATRON_CIF_DIGITO)

    def __init__(self, etiqueta: str, patron: re.Pattern):
        self.etiqueta = etiqueta
        self.patron = patron

    def coincide(self, documento: str) -> bool:
        return respeta_patron_documento(documento, self.patron)

    def calcular_digito_control(self, documento: str) -> str:
        if self is TipoDocumento.NIF:
            return obtener_digito_control_nif(documento)
        if self is TipoDocumento.NIE:
            return obtener_digito_control_nie(documento)
        return obtener_digito_control_cif(documento)


# Orden de prioridad al clasificar un documento
ORDEN_TIPOS = (
    TipoDocumento.NIF,
    TipoDocumento.NIE,
    TipoDocumento.CIF_LETRA,
    TipoDocumento.CIF_DIGITO,
)


def normalizar_documento(documento: Optional[str]) -> str:
    """
    Normaliza un número de documento: quita espacios exteriores, pasa a
    mayúsculas y, si empieza por dígito, rellena con ceros a la izquierda
    hasta 9 caracteres (permite escribir NIF sin ceros iniciales).

    La operación es idempotente.

    Example:
        >>> normalizar_documento(" 6089822c")
        '06089822C'
    """
    if not isinstance(documento, str):
        return ""
    fijo = documento.strip().upper()
    if fijo and fijo[0] in DIGITOS:
        fijo = fijo.rjust(LONGITUD_DOCUMENTO, "0")
    return fijo


def respeta_patron_documento(documento: Optional[str], patron: re.Pattern) -> bool:
    """
    Comprueba si el documento normalizado (9 caracteres) encaja en el patrón.
    """
    fijo = normalizar_documento(documento)
    if len(fijo) != LONGITUD_DOCUMENTO:
        return False
    return patron.fullmatch(fijo) is not None


def detectar_tipo_documento(documento: Optional[str]) -> Optional[TipoDocumento]:
    """
    Devuelve la primera variante (NIF -> NIE -> CIF) cuyo patrón encaja,
    o None si el documento no respeta ningún formato.
    """
    for tipo in ORDEN_TIPOS:
        if tipo.coincide(documento):
            return tipo
    return None


def es_formato_nif(documento: Optional[str]) -> bool:
    return TipoDocumento.NIF.coincide(documento)


def es_formato_nie(documento: Optional[str]) -> bool:
    return TipoDocumento.NIE.coincide(documento)


def es_formato_cif(documento: Optional[str]) -> bool:
    return TipoDocumento.CIF_LETRA.coincide(documento) or TipoDocumento.CIF_DIGITO.coincide(documento)


def obtener_digito_control_nif(documento: Optional[str]) -> str:
    """
    Calcula la letra de control de un NIF.

    El carácter de control escrito se ignora, por lo que puede pasarse un cero
    en su lugar. Las letras K, L y M iniciales cuentan como 0.

    Returns:
        Letra de control, o cadena vacía si el documento no tiene formato NIF

    Example:
        >>> obtener_digito_control_nif("335764280")
        'Q'
    """
    fijo = normalizar_documento(documento)
    if not es_formato_nif(fijo):
        return ""

    if fijo[0] in "KLM":
        fijo = "0" + fijo[1:]

    posicion = int(fijo[:8]) % 23
    return LETRAS_NIF[posicion]


def obtener_digito_control_nie(documento: Optional[str]) -> str:
    """
    Calcula la letra de control de un NIE sustituyendo la letra inicial
    (X=0, Y=1, Z=2) y aplicando el algoritmo del NIF.

    Los NIE antiguos con inicial T no tienen letra calculable: cadena vacía.
    """
    fijo = normalizar_documento(documento)
    if not es_formato_nie(fijo):
        return ""

    digito_inicial = DIGITO_INICIAL_NIE.get(fijo[0])
    if digito_inicial is None:
        return ""
    return obtener_digito_control_nif(digito_inicial + fijo[1:])


def obtener_digito_control_cif(documento: Optional[str]) -> str:
    """
    Calcula el dígito (o letra) de control de un CIF.

    Sobre los 7 dígitos centrales:
    1. Las posiciones pares (1ª, 3ª, 5ª y 7ª) se multiplican por 2 y se suman
       las cifras de cada producto (8 -> 16 -> 1 + 6 = 7)
    2. Las posiciones impares (2ª, 4ª y 6ª) se suman directamente
    3. Dígito = 10 - última cifra de la suma total (0 si la última cifra es 0)
    4. Si la organización es P, Q, S, N, W o R el dígito se traduce a letra
       con la cadena "JABCDEFGHI"

    Returns:
        Carácter de control, o cadena vacía si el documento no tiene formato CIF

    Example:
        >>> obtener_digito_control_cif("H24930830")
        '6'
        >>> obtener_digito_control_cif("Q54626360")
        'A'
    """
    fijo = normalizar_documento(documento)
    if not es_formato_cif(fijo):
        return ""

    tipo_organizacion = fijo[0]
    centrales = fijo[1:8]

    suma_impares = sum(int(centrales[i]) for i in (1, 3, 5))
    suma_pares = sum(sumar_digitos(int(centrales[i]) * 2) for i in (0, 2, 4, 6))

    total = suma_impares + suma_pares
    digito = (10 - total % 10) % 10

    if tipo_organizacion in TIPOS_CIF_CON_LETRA:
        return LETRAS_CIF[digito]
    return str(digito)


def _coincide_caracter_control(fijo: str, correcto: str) -> bool:
    return correcto != "" and fijo[-1] == correcto


def validar_nif(documento: Optional[str]) -> bool:
    """
    Valida un NIF comprobando formato y letra de control.

    Example:
        >>> validar_nif("33576428Q")
        True
    """
    fijo = normalizar_documento(documento)
    if not es_formato_nif(fijo):
        return False
    return _coincide_caracter_control(fijo, obtener_digito_control_nif(fijo))


def validar_nie(documento: Optional[str]) -> bool:
    """
    Valida un NIE. Los NIE antiguos (inicial T) se aceptan sin comprobar la letra.

    Example:
        >>> validar_nie("X6089822C")
        True
    """
    fijo = normalizar_documento(documento)
    if not es_formato_nie(fijo):
        return False
    if fijo[0] == "T":
        return True
    return _coincide_caracter_control(fijo, obtener_digito_control_nie(fijo))


def validar_cif(documento: Optional[str]) -> bool:
    """
    Valida un CIF comprobando formato y carácter de control.

    Example:
        >>> validar_cif("F43298256")
        True
    """
    fijo = normalizar_documento(documento)
    if not es_formato_cif(fijo):
        return False
    return _coincide_caracter_control(fijo, obtener_digito_control_cif(fijo))


_VALIDADORES = {
    TipoDocumento.NIF: validar_nif,
    TipoDocumento.NIE: validar_nie,
    TipoDocumento.CIF_LETRA: validar_cif,
    TipoDocumento.CIF_DIGITO: validar_cif,
}


def validar_numero_identificacion(documento: Optional[str]) -> bool:
    """
    Valida cualquier número de identificación español (NIF, NIE o CIF).

    Clasifica el documento por su formato en orden NIF -> NIE -> CIF y
    delega en el validador correspondiente. Devuelve False si no encaja en
    ningún formato.

    Example:
        >>> validar_numero_identificacion("G28667152")
        True
    """
    tipo = detectar_tipo_documento(documento)
    if tipo is None:
        return False
    return _VALIDADORES[tipo](documento)


def obtener_tipo_identificacion(documento: Optional[str]) -> str:
    """
    Devuelve la descripción del tipo de titular según el carácter inicial.

    Solo comprueba el formato (no el carácter de control). Devuelve cadena
    vacía si el documento no respeta ningún formato.

    Example:
        >>> obtener_tipo_identificacion("A49640873")
        'Sociedad Anónima'
    """
    if detectar_tipo_documento(documento) is None:
        return ""
    fijo = normalizar_documento(documento)
    return TIPOS_IDENTIFICACION.get(fijo[0], "")
