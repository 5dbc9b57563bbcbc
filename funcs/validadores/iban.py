"""
Validación de IBAN (ISO 13616) y cálculo del identificador global SEPA (AT-02).

El IBAN se espera en formato electrónico; los espacios del formato impreso
se eliminan antes de validar. El cálculo de control usa módulo 97 sobre una
cadena numérica que puede superar la precisión de un entero nativo, por lo que
se procesa por bloques.
"""
import re
from typing import Optional

from funcs.validadores.constantes import (
    ALFANUMERICO,
    DIGITOS,
    LONGITUD_IBAN_POR_PAIS,
    PATRON_ALFANUMERICO,
    PATRON_CODIGO_PAIS,
)
from funcs.validadores.utilidades import (
    insertar_cada,
    modulo_numero_grande,
    reemplazar_caracteres_fuera_de_patron,
    reemplazar_letras_por_digitos,
)


def normalizar_iban(iban: Optional[str]) -> str:
    """
    Pasa un IBAN a formato electrónico: sin espacios y en mayúsculas.
    """
    if not isinstance(iban, str):
        return ""
    return re.sub(r"\s+", "", iban).upper()


def formatear_iban(iban: Optional[str]) -> str:
    """
    Devuelve el IBAN en formato impreso, en grupos de 4 separados por espacios.

    Example:
        >>> formatear_iban("ES9121000418450200051332")
        'ES91 2100 0418 4502 0005 1332'
    """
    return insertar_cada(normalizar_iban(iban), " ", 4)


def obtener_longitud_cuenta(codigo_pais: Optional[str]) -> int:
    """
    Devuelve la longitud esperada del IBAN para un código de país ISO de
    2 letras, o 0 si el país no pertenece al área SEPA.

    Example:
        >>> obtener_longitud_cuenta("GB")
        22
    """
    if not isinstance(codigo_pais, str):
        return 0
    return LONGITUD_IBAN_POR_PAIS.get(codigo_pais.strip().upper(), 0)


def es_pais_sepa(codigo_pais: Optional[str]) -> bool:
    return obtener_longitud_cuenta(codigo_pais) != 0


def _digitos_mod97(numerico: str) -> str:
    # 98 - resto, rellenado a dos dígitos
    return f"{98 - modulo_numero_grande(numerico, 97):02d}"


def obtener_digitos_control_iban(iban: Optional[str]) -> str:
    """
    Calcula los dígitos de control de un IBAN completo.

    Los dígitos escritos se ignoran (pueden sustituirse por 00):
    1. Se mueven país + "00" al final de la cadena
    2. Cada letra se sustituye por dos dígitos (A=10 ... Z=35)
    3. Dígitos = 98 - (número % 97), con dos cifras

    Returns:
        Dos dígitos, o cadena vacía si el país no es SEPA, la longitud no
        coincide o hay caracteres no alfanuméricos

    Example:
        >>> obtener_digitos_control_iban("GB00WEST12345698765432")
        '82'
    """
    fijo = normalizar_iban(iban)
    codigo_pais = fijo[:2]

    longitud = obtener_longitud_cuenta(codigo_pais)
    if longitud == 0 or len(fijo) != longitud:
        return ""
    if PATRON_ALFANUMERICO.fullmatch(fijo) is None:
        return ""

    reordenado = fijo[4:] + codigo_pais + "00"
    return _digitos_mod97(reemplazar_letras_por_digitos(reordenado))


def validar_iban(iban: Optional[str]) -> bool:
    """
    Valida un IBAN: país SEPA, longitud del país y dígitos de control.

    Example:
        >>> validar_iban("GB82WEST12345698765432")
        True
    """
    fijo = normalizar_iban(iban)
    correctos = obtener_digitos_control_iban(fijo)
    return correctos != "" and fijo[2:4] == correctos


def obtener_identificador_global(
    id_local: Optional[str],
    codigo_pais: Optional[str],
    sufijo: Optional[str] = "",
) -> str:
    """
    Construye el identificador global SEPA (AT-02) a partir del identificador
    local, el código de país y el sufijo comercial.

    1. Se concatena id_local + país + "00" y se eliminan los caracteres no
       alfanuméricos
    2. Las letras se sustituyen por dígitos (A=10 ... Z=35)
    3. Dígitos de control = 98 - (número % 97), con dos cifras
    4. El sufijo se limpia (no dígitos -> "0") y se deja en 3 cifras
    5. Resultado: país + dígitos + sufijo + id_local

    Returns:
        Identificador global, o cadena vacía si el país no son 2 letras o el
        identificador local está vacío

    Example:
        >>> obtener_identificador_global("G28667152", "ES", "")
        'ES55000G28667152'
    """
    if not isinstance(id_local, str) or not isinstance(codigo_pais, str):
        return ""

    pais = codigo_pais.strip().upper()
    local = id_local.strip().upper()
    if PATRON_CODIGO_PAIS.fullmatch(pais) is None:
        return ""

    alfanumerico = reemplazar_caracteres_fuera_de_patron(local + pais + "00", ALFANUMERICO, "")
    if alfanumerico == pais + "00":
        return ""

    digitos = _digitos_mod97(reemplazar_letras_por_digitos(alfanumerico))

    sufijo_limpio = reemplazar_caracteres_fuera_de_patron(sufijo or "", DIGITOS, "0")
    sufijo_limpio = ("000" + sufijo_limpio)[-3:]

    return pais + digitos + sufijo_limpio + local
