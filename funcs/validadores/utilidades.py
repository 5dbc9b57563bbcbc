"""
Utilidades de cadena para el cálculo de dígitos de control.
Incluye el módulo de números grandes expresados como cadena, la conversión
de letras a dígitos (A=10 ... Z=35) y el filtrado de caracteres.
"""
from typing import Union

from funcs.validadores.constantes import BLOQUE_MODULO, DIGITOS, LETRAS


def modulo_numero_grande(numero: str, divisor: int) -> int:
    """
    Calcula `numero % divisor` para un número decimal dado como cadena.

    Procesa la cadena de izquierda a derecha en bloques de BLOQUE_MODULO
    dígitos, arrastrando el resto al bloque siguiente.

    Args:
        numero: Cadena de dígitos (puede tener ceros a la izquierda)
        divisor: Divisor entero positivo

    Returns:
        Resto de la división (0 para la cadena vacía)

    Raises:
        ValueError: Si la cadena contiene caracteres que no son dígitos

    Example:
        >>> modulo_numero_grande("3214282912345698765432161182", 97)
        1
    """
    if any(caracter not in DIGITOS for caracter in numero):
        raise ValueError(f"El dividendo debe contener solo dígitos. Recibido: '{numero}'")

    resto = 0
    for inicio in range(0, len(numero), BLOQUE_MODULO):
        bloque = numero[inicio:inicio + BLOQUE_MODULO]
        resto = int(f"{resto}{bloque}") % divisor
    return resto


def reemplazar_letras_por_digitos(cadena: str) -> str:
    """
    Sustituye cada letra por su equivalente numérico de dos dígitos
    (A o a = 10, B o b = 11, ..., Z o z = 35), según ECBS EBS204.

    Los caracteres que no son letras se mantienen.

    Example:
        >>> reemplazar_letras_por_digitos("510007547061BE00")
        '510007547061111400'
    """
    partes = []
    for caracter in cadena:
        mayuscula = caracter.upper()
        if len(mayuscula) == 1 and mayuscula in LETRAS:
            partes.append(str(LETRAS.index(mayuscula) + 10))
        else:
            partes.append(caracter)
    return "".join(partes)


def reemplazar_caracteres_fuera_de_patron(cadena: str, permitidos: str, reemplazo: str) -> str:
    """
    Reemplaza por `reemplazo` cada carácter de `cadena` que no esté en `permitidos`.
    Con un reemplazo vacío los caracteres no permitidos se eliminan.

    Example:
        >>> reemplazar_caracteres_fuera_de_patron("ABC123-?:", ALFANUMERICO, "0")
        'ABC123000'
    """
    return "".join(caracter if caracter in permitidos else reemplazo for caracter in cadena)


def sumar_digitos(cantidad: Union[int, str]) -> int:
    """
    Suma uno a uno los dígitos de una cantidad: 123 -> 1 + 2 + 3 = 6.
    """
    return sum(int(caracter) for caracter in str(cantidad) if caracter in DIGITOS)


def insertar_cada(cadena: str, caracter: str, n: int, eliminar_existentes: bool = True) -> str:
    """
    Inserta `caracter` en `cadena` cada `n` posiciones, sin añadirlo al final.

    Si `n` no es un entero positivo se devuelve la cadena original. Por defecto
    se eliminan antes las apariciones previas del carácter.

    Example:
        >>> insertar_cada("0000000", "-", 2)
        '00-00-00-0'
    """
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        return cadena

    if eliminar_existentes and caracter:
        cadena = cadena.replace(caracter, "")

    return caracter.join(cadena[i:i + n] for i in range(0, len(cadena), n))
