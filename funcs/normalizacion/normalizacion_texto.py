"""
Normalización de texto libre antes de buscar identificadores.
Elimina caracteres problemáticos y separadores dentro de los números para que
"12.345.678-Z" se detecte como "12345678Z". Los espacios entre grupos de un
IBAN impreso se conservan; el detector los gestiona.
"""
import re
import unicodedata

# Caracteres de control (se conservan \t, \n y \r, que luego pasan a espacio)
CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x0c\x0e-\x1f\x7f-\x9f]")


def normalizar_texto_identificadores(texto: str) -> str:
    """
    Prepara un texto para la detección de identificadores.

    - Forma canónica NFKC y sin caracteres de control ni de reemplazo
    - Mayúsculas
    - Sin puntos, guiones ni barras entre dígitos (separadores de miles)
    - Sin guion entre el número y la letra de control final
    - Espacios múltiples colapsados
    """
    if not texto:
        return ""

    texto = texto.replace("�", "")
    texto = unicodedata.normalize("NFKC", texto)
    texto = CONTROL_CHARS.sub("", texto)

    texto = texto.replace("\n", " ").replace("\r", " ").replace("\t", " ")
    texto = re.sub(r"\s+", " ", texto).strip()
    texto = texto.upper()

    # 12.345.678 / 12-345-678 -> 12345678
    texto = re.sub(r"(?<=[0-9])[.\-/]+(?=[0-9])", "", texto)

    # 12345678-Z -> 12345678Z
    texto = re.sub(r"(?<=[0-9])-(?=[A-Z](?![A-Z0-9]))", "", texto)

    # X-1234567-L -> X1234567L
    texto = re.sub(r"(?<=\b[A-Z])-(?=[0-9])", "", texto)

    return texto
