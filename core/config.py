# core/config.py
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- Core ---
    app_title: str = Field(
        "API: Validación de identificadores españoles y SEPA",
        description="Título mostrado en la documentación Swagger",
    )
    api_prefix: str = Field("/api", description="Prefijo común de los endpoints")

    # --- Logging ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO",
        description="Nivel del logger de la aplicación",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalizar_log_level(cls, v):
        """Admite el nivel en minúsculas (ej: "debug")."""
        return v.strip().upper() if isinstance(v, str) else v

    # --- Límites de las peticiones ---
    max_documentos_lote: int = Field(
        500,
        ge=1,
        description="Máximo de documentos aceptados en una validación por lotes",
    )
    ventana_contexto: int = Field(
        60,
        ge=0,
        description="Caracteres de contexto devueltos alrededor de cada identificador detectado en texto",
    )

    model_config = SettingsConfigDict(
        env_prefix="VALIDADOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
