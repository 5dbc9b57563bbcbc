"""
Validación de cuentas bancarias españolas (Código Cuenta Cliente, CCC).
Estructura: entidad (4) + oficina (4) + dígitos de control (2) + cuenta (10).
"""
from typing import Optional, Sequence

from funcs.validadores.constantes import (
    PATRON_CUENTA,
    PATRON_ENTIDAD,
    PATRON_OFICINA,
    PESOS_CUENTA,
    PESOS_ENTIDAD,
    PESOS_OFICINA,
)


def respeta_patron_cuenta(entidad: Optional[str], oficina: Optional[str], cuenta: Optional[str]) -> bool:
    """
    Comprueba que entidad, oficina y cuenta sean cadenas solo de dígitos
    con longitud 4, 4 y 10 respectivamente.
    """
    partes = ((entidad, PATRON_ENTIDAD), (oficina, PATRON_OFICINA), (cuenta, PATRON_CUENTA))
    return all(
        isinstance(valor, str) and patron.fullmatch(valor) is not None
        for valor, patron in partes
    )


def _suma_ponderada(digitos: str, pesos: Sequence[int]) -> int:
    return sum(int(digito) * peso for digito, peso in zip(digitos, pesos))


def _digito_modulo_11(suma: int) -> int:
    # 11 -> 0 y 10 -> 1, como en la norma bancaria
    digito = 11 - suma % 11
    if digito == 11:
        return 0
    if digito == 10:
        return 1
    return digito


def obtener_digitos_control_cuenta(entidad: Optional[str], oficina: Optional[str], cuenta: Optional[str]) -> str:
    """
    Calcula los dos dígitos de control de una CCC por módulo 11.

    1. Primer dígito: entidad con pesos (4, 8, 5, 10) + oficina con (9, 7, 3, 6)
    2. Segundo dígito: cuenta con pesos (1, 2, 4, 8, 5, 10, 9, 7, 3, 6)
    3. Cada dígito = 11 - (suma % 11); 11 pasa a 0 y 10 pasa a 1

    Returns:
        Cadena de dos dígitos, o cadena vacía si las partes no respetan el patrón

    Example:
        >>> obtener_digitos_control_cuenta("1234", "1234", "1234567890")
        '16'
    """
    if not respeta_patron_cuenta(entidad, oficina, cuenta):
        return ""

    primero = _digito_modulo_11(
        _suma_ponderada(entidad, PESOS_ENTIDAD) + _suma_ponderada(oficina, PESOS_OFICINA)
    )
    segundo = _digito_modulo_11(_suma_ponderada(cuenta, PESOS_CUENTA))

    return f"{primero}{segundo}"


def validar_cuenta_bancaria(
    entidad: Optional[str],
    oficina: Optional[str],
    digitos_control: Optional[str],
    cuenta: Optional[str],
) -> bool:
    """
    Valida una CCC comprobando el formato de sus partes y los dígitos de control.

    Example:
        >>> validar_cuenta_bancaria("1234", "1234", "16", "1234567890")
        True
    """
    correctos = obtener_digitos_control_cuenta(entidad, oficina, cuenta)
    return correctos != "" and correctos == digitos_control
