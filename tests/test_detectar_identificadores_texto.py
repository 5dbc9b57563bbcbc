"""
Tests para la normalización de texto libre y la detección de NIF, NIE, CIF e
IBAN dentro de él.
"""
import pytest

from core.config import settings
from funcs.detectar_identificadores_texto import (
    detectar_identificadores_en_texto,
    filtrar_identificadores_invalidos,
)
from funcs.normalizacion.normalizacion_texto import normalizar_texto_identificadores

TEXTO_PAGO = "Pagar a la cuenta ES91 2100 0418 4502 0005 1332 del titular con NIF 12345678Z."


class TestNormalizarTexto:

    @pytest.mark.parametrize("texto,esperado", [
        ("12.345.678-z", "12345678Z"),
        ("x-6089822-c", "X6089822C"),
        ("  nif\n\t12345678z  ", "NIF 12345678Z"),
        ("１２３４５６７８Z", "12345678Z"),
        ("ES91 2100 0418", "ES91 2100 0418"),
        ("", ""),
    ])
    def test_normaliza(self, texto, esperado):
        assert normalizar_texto_identificadores(texto) == esperado

    def test_no_une_conjuncion(self):
        """La 'y' entre dos números no se pega a ninguno de ellos"""
        assert normalizar_texto_identificadores("1234 y 5678") == "1234 Y 5678"

    def test_elimina_caracteres_de_control(self):
        assert normalizar_texto_identificadores("123\x00456") == "123456"


class TestDetectarDocumentos:

    def test_nif_valido(self):
        resultado = detectar_identificadores_en_texto(TEXTO_PAGO)
        assert len(resultado["documentos"]) == 1
        documento = resultado["documentos"][0]
        assert documento["numero"] == "12345678Z"
        assert documento["tipo"] == "NIF"
        assert documento["valido"] is True
        assert "razon" not in documento
        assert "12345678Z" in documento["contexto"]

    def test_nif_invalido(self):
        documento = detectar_identificadores_en_texto("El NIF 12345678A no es correcto")["documentos"][0]
        assert documento["valido"] is False
        assert documento["razon"] == "Carácter de control incorrecto"

    def test_nie_con_guiones(self):
        documento = detectar_identificadores_en_texto("NIE: x-6089822-c")["documentos"][0]
        assert documento["numero"] == "X6089822C"
        assert documento["tipo"] == "NIE"
        assert documento["valido"] is True

    def test_cif(self):
        documento = detectar_identificadores_en_texto("Empresa con CIF b12345674, Madrid")["documentos"][0]
        assert documento["numero"] == "B12345674"
        assert documento["tipo"] == "CIF"
        assert documento["valido"] is True

    def test_nif_corto_se_rellena(self):
        documento = detectar_identificadores_en_texto("DNI 6089822C")["documentos"][0]
        assert documento["numero"] == "06089822C"
        assert documento["valido"] is True

    def test_sin_duplicados(self):
        resultado = detectar_identificadores_en_texto("12345678Z y de nuevo 12.345.678-Z")
        assert len(resultado["documentos"]) == 1

    def test_ignora_telefonos(self):
        resultado = detectar_identificadores_en_texto("Llame al 612345678 o al 912345678")
        assert resultado["documentos"] == []

    def test_contexto_limitado_a_la_ventana(self):
        texto = "A" * 100 + " 12345678Z " + "B" * 100
        documento = detectar_identificadores_en_texto(texto, ventana=5)["documentos"][0]
        assert documento["contexto"] == "AAAA 12345678Z BBBB"

    def test_ventana_por_defecto_desde_la_configuracion(self, monkeypatch):
        monkeypatch.setattr(settings, "ventana_contexto", 5)
        texto = "A" * 100 + " 12345678Z " + "B" * 100
        documento = detectar_identificadores_en_texto(texto)["documentos"][0]
        assert documento["contexto"] == "AAAA 12345678Z BBBB"


class TestDetectarIbans:

    def test_iban_impreso_valido(self):
        ibans = detectar_identificadores_en_texto(TEXTO_PAGO)["ibans"]
        assert len(ibans) == 1
        assert ibans[0]["numero"] == "ES9121000418450200051332"
        assert ibans[0]["tipo"] == "IBAN"
        assert ibans[0]["valido"] is True

    def test_iban_electronico_valido(self):
        ibans = detectar_identificadores_en_texto("IBAN: GB82WEST12345698765432.")["ibans"]
        assert ibans[0]["numero"] == "GB82WEST12345698765432"
        assert ibans[0]["valido"] is True

    def test_digitos_incorrectos(self):
        iban = detectar_identificadores_en_texto("Cuenta ES00 2100 0418 4502 0005 1332.")["ibans"][0]
        assert iban["valido"] is False
        assert iban["razon"] == "Dígitos de control incorrectos"

    def test_longitud_incorrecta(self):
        iban = detectar_identificadores_en_texto("Cuenta ES91 2100 0418.")["ibans"][0]
        assert iban["valido"] is False
        assert iban["razon"].startswith("Longitud incorrecta")

    def test_pais_no_sepa(self):
        assert detectar_identificadores_en_texto("Ref US12 3456 7890")["ibans"] == []

    @pytest.mark.parametrize("texto", [
        "Cuenta ES91 2100 0418 de Juan Perez",
        "Cuenta ES91 2100 0418 de Juan Perez Garcia",
        "Cuenta ES91 2100 0418 PARA pagos",
        "Cuenta ES91 2100 0418 JUAN PEREZ GARCIA LOPEZ",
    ])
    def test_iban_incompleto_no_absorbe_palabras(self, texto):
        iban = detectar_identificadores_en_texto(texto)["ibans"][0]
        assert iban["numero"] == "ES9121000418"
        assert iban["razon"].startswith("Longitud incorrecta")

    def test_iban_impreso_con_letras_en_el_codigo_de_banco(self):
        iban = detectar_identificadores_en_texto("Pago a GB82 WEST 1234 5698 7654 32 hoy")["ibans"][0]
        assert iban["numero"] == "GB82WEST12345698765432"
        assert iban["valido"] is True

    def test_iban_completo_seguido_de_texto(self):
        iban = detectar_identificadores_en_texto("ES91 2100 0418 4502 0005 1332 PARA DON JUAN")["ibans"][0]
        assert iban["numero"] == "ES9121000418450200051332"
        assert iban["valido"] is True


class TestFiltrarIdentificadoresInvalidos:

    def test_solo_invalidos(self):
        texto = "NIF 12345678Z, NIF 11111111A, cuenta ES00 2100 0418 4502 0005 1332."
        invalidos = filtrar_identificadores_invalidos(detectar_identificadores_en_texto(texto))
        assert [d["numero"] for d in invalidos["documentos"]] == ["11111111A"]
        assert [i["numero"] for i in invalidos["ibans"]] == ["ES0021000418450200051332"]

    def test_texto_sin_errores(self):
        encontrados = detectar_identificadores_en_texto(TEXTO_PAGO)
        assert filtrar_identificadores_invalidos(encontrados) == {"documentos": [], "ibans": []}

    def test_texto_vacio(self):
        encontrados = detectar_identificadores_en_texto("")
        assert filtrar_identificadores_invalidos(encontrados) == {"documentos": [], "ibans": []}
