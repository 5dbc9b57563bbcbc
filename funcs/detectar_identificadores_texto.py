"""
Módulo para detectar identificadores (NIF, NIE, CIF e IBAN) dentro de texto libre.
Cada identificador encontrado se valida con su carácter o dígitos de control y
se devuelve con el contexto en el que aparece.
"""
import re
from typing import Any, Dict, List, Optional, Tuple

from core.config import settings
from funcs.normalizacion.normalizacion_texto import normalizar_texto_identificadores
from funcs.validadores.documentos_identidad import (
    detectar_tipo_documento,
    normalizar_documento,
    validar_numero_identificacion,
)
from funcs.validadores.iban import obtener_longitud_cuenta, validar_iban

# Token de 8 o 9 caracteres: inicial opcional, 7 dígitos y carácter de control
PATRON_CANDIDATO_DOCUMENTO = re.compile(r"\b([A-Z0-9]?[0-9]{7}[A-Z0-9])\b")

# Primer bloque de un IBAN: país + 2 dígitos (+ resto si está en formato electrónico)
PATRON_CANDIDATO_IBAN = re.compile(r"\b[A-Z]{2}[0-9]{2}[A-Z0-9]*")

# Bloque siguiente de un IBAN impreso, separado por un espacio
PATRON_GRUPO_IBAN = re.compile(r" ([A-Z0-9]+)")

LONGITUD_GRUPO_IBAN = 4


def detectar_identificadores_en_texto(texto: str, ventana: Optional[int] = None) -> Dict[str, List[Dict[str, Any]]]:
    """
    Busca todos los documentos de identidad e IBAN del texto y los valida.

    Args:
        texto: Texto libre (se normaliza internamente)
        ventana: Caracteres de contexto antes y después de cada coincidencia
            (por defecto, `settings.ventana_contexto`)

    Returns:
        Diccionario con:
        - documentos: NIF/NIE/CIF encontrados
        - ibans: IBAN encontrados

        Cada identificador incluye:
        - numero: Identificador normalizado
        - tipo: "NIF", "NIE", "CIF" o "IBAN"
        - contexto: Texto alrededor
        - valido: True si el control es correcto
        - razon: Motivo del rechazo (solo si no es válido)
    """
    if ventana is None:
        ventana = settings.ventana_contexto

    texto_normalizado = normalizar_texto_identificadores(texto)

    return {
        'documentos': _buscar_documentos_en_texto(texto_normalizado, ventana),
        'ibans': _buscar_ibans_en_texto(texto_normalizado, ventana),
    }


def filtrar_identificadores_invalidos(
    encontrados: Dict[str, List[Dict[str, Any]]]
) -> Dict[str, List[Dict[str, Any]]]:
    """
    Filtra el resultado de `detectar_identificadores_en_texto` y retorna solo
    los identificadores inválidos.

    Returns:
        Diccionario con las mismas claves ('documentos' e 'ibans'), cada una
        con la lista de identificadores cuyo control es incorrecto
    """
    return {
        tipo: [doc for doc in docs if not doc['valido']]
        for tipo, docs in encontrados.items()
    }


def _buscar_documentos_en_texto(texto: str, ventana: int) -> List[Dict[str, Any]]:
    """
    Busca NIF, NIE y CIF en el texto normalizado.

    Solo se consideran tokens con al menos una letra, para no confundir
    teléfonos u otros números de 9 cifras con un NIF.
    """
    resultados = []
    numeros_vistos = set()

    for match in PATRON_CANDIDATO_DOCUMENTO.finditer(texto):
        candidato = match.group(1)
        if not re.search(r"[A-Z]", candidato):
            continue

        tipo = detectar_tipo_documento(candidato)
        if tipo is None:
            continue

        numero = normalizar_documento(candidato)

        # Evitar duplicados
        if numero in numeros_vistos:
            continue
        numeros_vistos.add(numero)

        valido = validar_numero_identificacion(numero)
        documento = {
            'numero': numero,
            'tipo': tipo.etiqueta,
            'contexto': _extraer_contexto(texto, match.start(), match.end(), ventana),
            'valido': valido,
        }
        if not valido:
            documento['razon'] = 'Carácter de control incorrecto'
        resultados.append(documento)

    return resultados


def _buscar_ibans_en_texto(texto: str, ventana: int) -> List[Dict[str, Any]]:
    """
    Busca IBAN de países SEPA en el texto normalizado, en formato electrónico
    o impreso (grupos separados por un espacio).
    """
    resultados = []
    numeros_vistos = set()
    posicion = 0

    while True:
        match = PATRON_CANDIDATO_IBAN.search(texto, posicion)
        if match is None:
            break

        codigo_pais = match.group(0)[:2]
        longitud = obtener_longitud_cuenta(codigo_pais)
        if longitud == 0:
            posicion = match.start() + 2
            continue

        fin, numero = _recortar_iban(texto, match, longitud)
        posicion = fin

        # Evitar duplicados
        if numero in numeros_vistos:
            continue
        numeros_vistos.add(numero)

        iban = {
            'numero': numero,
            'tipo': 'IBAN',
            'contexto': _extraer_contexto(texto, match.start(), fin, ventana),
            'valido': False,
        }
        if len(numero) != longitud:
            iban['razon'] = f'Longitud incorrecta: se esperaban {longitud} caracteres para {codigo_pais}'
        elif validar_iban(numero):
            iban['valido'] = True
        else:
            iban['razon'] = 'Dígitos de control incorrectos'
        resultados.append(iban)

    return resultados


def _recortar_iban(texto: str, match: re.Match, longitud: int) -> Tuple[int, str]:
    """
    Reconstruye el IBAN que empieza en `match` sin pasar de `longitud` caracteres.

    Si el primer bloque tiene 4 caracteres se trata como formato impreso y se
    añaden los bloques siguientes separados por un espacio mientras sean
    plausibles: 4 caracteres, o los justos para completar la longitud en el
    último bloque. Un bloque solo de letras únicamente se admite como primer
    bloque del BBAN (código de banco, ej: "GB82 WEST ..."); así las palabras
    que siguen a un IBAN incompleto no se le añaden.

    Returns:
        Tupla (posición final en el texto, IBAN en formato electrónico)
    """
    numero = match.group(0)[:longitud]
    fin = match.start() + len(numero)
    if len(numero) != LONGITUD_GRUPO_IBAN:
        return fin, numero

    while len(numero) < longitud:
        grupo = PATRON_GRUPO_IBAN.match(texto, fin)
        if grupo is None:
            break

        bloque = grupo.group(1)
        if len(bloque) != min(LONGITUD_GRUPO_IBAN, longitud - len(numero)):
            break
        if bloque.isalpha() and len(numero) > LONGITUD_GRUPO_IBAN:
            break

        numero += bloque
        fin = grupo.end()

    return fin, numero


def _extraer_contexto(texto: str, start: int, end: int, window: int) -> str:
    """
    Extrae el contexto alrededor de una posición en el texto.

    Args:
        texto: Texto completo
        start: Posición inicial
        end: Posición final
        window: Ventana de contexto (caracteres antes y después)

    Returns:
        Contexto extraído
    """
    start_ctx = max(0, start - window)
    end_ctx = min(len(texto), end + window)
    return texto[start_ctx:end_ctx].strip()
