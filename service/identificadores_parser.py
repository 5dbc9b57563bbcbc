"""
Módulo para parsear y normalizar la entrada de lotes de identificadores.
Soporta los formatos habituales desde Postman o formularios (lista JSON,
cadena con un array JSON, valores separados por comas, punto y coma o saltos de línea).
"""
import json
import re
from typing import List, Optional, Union

SEPARADORES = re.compile(r"[,;\n\r]+")


def parse_identificadores_input(entrada: Optional[Union[List[str], str]]) -> List[str]:
    """
    Normaliza la entrada `numeros` que puede llegar de varias formas:
      - Lista JSON -> List[str] (ok)
      - Lista con un único elemento '["12345678Z","B12345674"]' -> array JSON embebido
      - Cadena '12345678Z, B12345674' -> separada por comas, punto y coma o saltos de línea
      - Valor único -> lista de un elemento

    Se eliminan espacios exteriores, comillas sueltas y entradas vacías; se
    mantiene el orden y los duplicados (cada posición tiene su resultado).

    Args:
        entrada: Entrada de identificadores en formato variable

    Returns:
        Lista de identificadores limpios

    Examples:
        >>> parse_identificadores_input("12345678Z; X6089822C")
        ['12345678Z', 'X6089822C']
    """
    if entrada is None:
        return []

    # Si ya es lista con varios elementos normales
    if isinstance(entrada, list) and len(entrada) > 1:
        return [_limpiar(e) for e in entrada if isinstance(e, str) and _limpiar(e)]

    # Si es lista con un único elemento, o un string único
    single = None
    if isinstance(entrada, list) and len(entrada) == 1:
        single = entrada[0]
    elif isinstance(entrada, str):
        single = entrada

    if not isinstance(single, str):
        return []

    raw = single.strip()

    # Intentar parsear JSON array
    if raw.startswith("[") and raw.endswith("]"):
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            # Si falla, seguir intentando otros formatos
            parsed = None
        if isinstance(parsed, list):
            return [_limpiar(str(x)) for x in parsed if _limpiar(str(x))]

    # Si viene separado por comas, punto y coma o saltos de línea
    partes = [_limpiar(p) for p in SEPARADORES.split(raw)]
    return [p for p in partes if p]


def _limpiar(valor: str) -> str:
    return valor.strip().strip('"').strip("'").strip()
