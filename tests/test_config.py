"""
Tests para la configuración de la aplicación (variables VALIDADOR_*).
"""
import pytest
from pydantic import ValidationError

from core.config import Settings


class TestSettings:

    def test_valores_por_defecto(self, monkeypatch):
        monkeypatch.delenv("VALIDADOR_LOG_LEVEL", raising=False)
        config = Settings(_env_file=None)
        assert config.log_level == "INFO"
        assert config.api_prefix == "/api"
        assert config.ventana_contexto == 60

    def test_log_level_desde_entorno(self, monkeypatch):
        monkeypatch.setenv("VALIDADOR_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_log_level_invalido(self, monkeypatch):
        """Un nivel desconocido se rechaza al cargar la configuración"""
        monkeypatch.setenv("VALIDADOR_LOG_LEVEL", "VERBOSE")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_maximo_lote_positivo(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_documentos_lote=0)
