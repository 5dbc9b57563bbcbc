"""
Configuración central de pytest y fixtures compartidas para todos los tests.

Proporciona:
- Cliente HTTP de prueba sobre la aplicación FastAPI
- Prefijo de la API según la configuración
"""
import pytest
from fastapi.testclient import TestClient

from app import app
from core.config import settings


# ==================== FIXTURES GLOBALES ====================

@pytest.fixture
def client():
    """Cliente HTTP para pruebas de endpoints."""
    return TestClient(app)


@pytest.fixture
def api():
    """Prefijo de las rutas de la API (ej: '/api')."""
    return settings.api_prefix
