"""
Tests para el parseo de la entrada de lotes de documentos.
"""
import pytest

from service.identificadores_parser import parse_identificadores_input


class TestParseIdentificadores:

    def test_none(self):
        assert parse_identificadores_input(None) == []

    def test_lista(self):
        assert parse_identificadores_input(["12345678Z", " X6089822C "]) == ["12345678Z", "X6089822C"]

    def test_lista_descarta_vacios(self):
        assert parse_identificadores_input(["12345678Z", "", "  "]) == ["12345678Z"]

    def test_array_json_embebido(self):
        assert parse_identificadores_input(['["12345678Z","B12345674"]']) == ["12345678Z", "B12345674"]

    def test_cadena_con_array_json(self):
        assert parse_identificadores_input('["12345678Z", "B12345674"]') == ["12345678Z", "B12345674"]

    @pytest.mark.parametrize("entrada", [
        "12345678Z, X6089822C",
        "12345678Z; X6089822C",
        "12345678Z\nX6089822C",
        "'12345678Z',\"X6089822C\"",
    ])
    def test_separadores(self, entrada):
        assert parse_identificadores_input(entrada) == ["12345678Z", "X6089822C"]

    def test_valor_unico(self):
        assert parse_identificadores_input("12345678Z") == ["12345678Z"]

    def test_conserva_orden_y_duplicados(self):
        assert parse_identificadores_input("B, A, B") == ["B", "A", "B"]

    def test_json_mal_formado(self):
        assert parse_identificadores_input("[12345678Z, X6089822C]") == ["[12345678Z", "X6089822C]"]

    def test_cadena_vacia(self):
        assert parse_identificadores_input("") == []
