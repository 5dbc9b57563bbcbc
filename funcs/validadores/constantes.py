"""
Constantes compartidas por los validadores de identificadores.
Centraliza patrones, cadenas de control y tablas de consulta para evitar
duplicación entre módulos. Todas las tablas son de solo lectura.
"""
import re
from types import MappingProxyType

# Cadenas de control
LETRAS_NIF = "TRWAGMYFPDXBNJZSQVHLCKE"
LETRAS_CIF = "JABCDEFGHI"

LETRAS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITOS = "0123456789"
ALFANUMERICO = LETRAS + DIGITOS

# Longitud canónica de un documento tras normalizar
LONGITUD_DOCUMENTO = 9

# Patrones de documentos (se aplican con fullmatch sobre la cadena normalizada)
PATRON_NIF = re.compile(r"[KLM0-9][0-9]{7}[A-Z0-9]")
PATRON_NIE = re.compile(r"[XYZT][0-9]{7}[A-Z0-9]")
PATRON_CIF_LETRA = re.compile(r"[PQSNWR][0-9]{7}[A-Z0-9]")
PATRON_CIF_DIGITO = re.compile(r"[ABCDEFGHJUV][0-9]{8}")

# Tipos de organización cuyo dígito de control de CIF es una letra
TIPOS_CIF_CON_LETRA = frozenset("PQSNWR")

# Sustitución de la letra inicial del NIE por su dígito
DIGITO_INICIAL_NIE = MappingProxyType({"X": "0", "Y": "1", "Z": "2"})

# Patrones de las partes de una cuenta bancaria (CCC)
PATRON_ENTIDAD = re.compile(r"[0-9]{4}")
PATRON_OFICINA = re.compile(r"[0-9]{4}")
PATRON_CUENTA = re.compile(r"[0-9]{10}")

# Pesos del algoritmo módulo 11 de la CCC
PESOS_ENTIDAD = (4, 8, 5, 10)
PESOS_OFICINA = (9, 7, 3, 6)
PESOS_CUENTA = (1, 2, 4, 8, 5, 10, 9, 7, 3, 6)

# Tamaño de bloque para el módulo de números grandes
BLOQUE_MODULO = 9

# Descripción del titular según el carácter inicial del documento
_DNI = "Español con documento nacional de identidad"
_NIE = "Extranjero residente en España e identificado por la Policía con un NIE"

TIPOS_IDENTIFICACION = MappingProxyType({
    "K": "Español menor de catorce años o extranjero menor de dieciocho",
    "L": "Español mayor de catorce años residiendo en el extranjero",
    "M": "Extranjero mayor de dieciocho años sin NIE",

    **{digito: _DNI for digito in DIGITOS},

    "T": _NIE,
    "X": _NIE,
    "Y": _NIE,
    "Z": _NIE,

    # BOE número 49, 26 de febrero de 2008 (artículo 3)
    "A": "Sociedad Anónima",
    "B": "Sociedad de responsabilidad limitada",
    "C": "Sociedad colectiva",
    "D": "Sociedad comanditaria",
    "E": "Comunidad de bienes y herencias yacentes",
    "F": "Sociedad cooperativa",
    "G": "Asociación",
    "H": "Comunidad de propietarios en régimen de propiedad horizontal",
    "J": "Sociedad Civil => con o sin personalidad jurídica",
    "N": "Entidad extranjera",
    "P": "Corporación local",
    "Q": "Organismo público",
    "R": "Congregación o Institución Religiosa",
    "S": "Órgano de la Administración del Estado y Comunidades Autónomas",
    "U": "Unión Temporal de Empresas",
    "V": "Fondo de inversiones o de pensiones, agrupación de interés económico, etc",
    "W": "Establecimiento permanente de entidades no residentes en España",
})

# Longitud del IBAN por país.
# Fuente: IBAN Registry (ISO 13616), release 45, abril 2013.
LONGITUD_IBAN_POR_PAIS = MappingProxyType({
    "AL": 28, "AD": 24, "AT": 20, "AZ": 28, "BH": 22,
    "BE": 16, "BA": 20, "BR": 29, "BG": 22, "CR": 21,
    "HR": 21, "CY": 28, "CZ": 24, "DK": 18, "DO": 28,
    "EE": 20, "FO": 18, "FI": 18, "FR": 27, "GE": 22,
    "DE": 22, "GI": 23, "GR": 27, "GL": 18, "GT": 28,
    "HU": 28, "IS": 26, "IE": 22, "IL": 23, "IT": 27,
    "KZ": 20, "KW": 30, "LV": 21, "LB": 28, "LI": 21,
    "LT": 20, "LU": 20, "MK": 19, "MT": 31, "MR": 27,
    "MU": 30, "MC": 27, "MD": 24, "ME": 22, "NL": 18,
    "NO": 15, "PK": 24, "PS": 29, "PL": 28, "PT": 25,
    "RO": 24, "SM": 27, "SA": 24, "RS": 22, "SK": 24,
    "SI": 19, "ES": 24, "SE": 24, "CH": 21, "TN": 24,
    "TR": 26, "AE": 23, "GB": 22, "VG": 24, "AO": 25,
    "BJ": 28, "BF": 27, "BI": 16, "CM": 27, "CV": 25,
    "IR": 26, "CI": 28, "MG": 27, "ML": 28, "MZ": 25,
    "SN": 28,
})

# Cadena alfanumérica en mayúsculas (IBAN en formato electrónico)
PATRON_ALFANUMERICO = re.compile(r"[A-Z0-9]+")
PATRON_CODIGO_PAIS = re.compile(r"[A-Z]{2}")
