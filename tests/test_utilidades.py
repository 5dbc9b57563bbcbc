"""
Tests de las utilidades de cadena usadas por los calculadores de control.
"""
import pytest

from funcs.validadores.constantes import ALFANUMERICO, DIGITOS
from funcs.validadores.utilidades import (
    insertar_cada,
    modulo_numero_grande,
    reemplazar_caracteres_fuera_de_patron,
    reemplazar_letras_por_digitos,
    sumar_digitos,
)


class TestModuloNumeroGrande:
    """Tests para el módulo por bloques de números expresados como cadena"""

    @pytest.mark.parametrize("numero,divisor", [
        ("3214282912345698765432161182", 97),
        ("1628667152142800", 97),
        ("21000418450200051332142800", 97),
        ("123456789", 97),
        ("0000000000000001", 7),
    ])
    def test_coincide_con_aritmetica_entera(self, numero, divisor):
        assert modulo_numero_grande(numero, divisor) == int(numero) % divisor

    def test_iban_valido_tiene_resto_uno(self):
        """GB82WEST12345698765432 reordenado y expandido"""
        assert modulo_numero_grande("3214282912345698765432161182", 97) == 1

    def test_cadena_vacia(self):
        assert modulo_numero_grande("", 97) == 0

    def test_rechaza_caracteres_no_numericos(self):
        with pytest.raises(ValueError):
            modulo_numero_grande("12A4", 97)


class TestReemplazarLetrasPorDigitos:
    """Tests para la conversión A=10 ... Z=35"""

    def test_reemplaza_letras(self):
        assert reemplazar_letras_por_digitos("510007547061BE00") == "510007547061111400"

    def test_solo_digitos(self):
        assert reemplazar_letras_por_digitos("1234567890") == "1234567890"

    def test_vacio(self):
        assert reemplazar_letras_por_digitos("") == ""

    def test_minusculas_equivalen_a_mayusculas(self):
        assert reemplazar_letras_por_digitos("az") == reemplazar_letras_por_digitos("AZ") == "1035"

    def test_letras_repetidas(self):
        assert reemplazar_letras_por_digitos("AA") == "1010"


class TestReemplazarCaracteresFueraDePatron:

    def test_reemplaza_no_permitidos(self):
        assert reemplazar_caracteres_fuera_de_patron("ABC123-?:", ALFANUMERICO, "0") == "ABC123000"

    def test_sin_caracteres_no_permitidos(self):
        assert reemplazar_caracteres_fuera_de_patron("12345", DIGITOS, "0") == "12345"

    def test_reemplazo_vacio_elimina(self):
        assert reemplazar_caracteres_fuera_de_patron("G-28.667", ALFANUMERICO, "") == "G28667"


def test_sumar_digitos():
    assert sumar_digitos("123") == 6
    assert sumar_digitos(12345) == 15
    assert sumar_digitos(16) == 7


class TestInsertarCada:
    """Tests para la inserción de separadores cada n posiciones"""

    def test_inserta_separador(self):
        assert insertar_cada("0000000", "-", 2) == "00-00-00-0"

    def test_no_anade_separador_al_final(self):
        assert insertar_cada("00000000", "-", 2) == "00-00-00-00"

    def test_caracter_vacio_devuelve_original(self):
        assert insertar_cada("00000000", "", 2) == "00000000"

    def test_n_cero_devuelve_original(self):
        assert insertar_cada("00000000", "-", 0) == "00000000"

    def test_elimina_separadores_existentes(self):
        assert insertar_cada("00-000-000", "-", 4) == "0000-0000"

    def test_conserva_separadores_existentes(self):
        assert insertar_cada("00-00", "-", 2, eliminar_existentes=False) == "00--0-0"
