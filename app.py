"""
Inicializa la aplicación FastAPI y monta los routers que exponen los endpoints
de validación de identificadores españoles (NIF/NIE/CIF) y bancarios (CCC, IBAN, AT-02).
"""
from fastapi import FastAPI

from core.config import settings
from core.logger import logger
from routes.bank_account_routes import router as bank_account_router
from routes.id_number_routes import router as id_number_router

app = FastAPI(title=settings.app_title)

# Routers de nuestros endpoints
app.include_router(id_number_router, prefix=settings.api_prefix)
app.include_router(bank_account_router, prefix=settings.api_prefix)

logger.info("Aplicación '%s' lista en el prefijo %s", settings.app_title, settings.api_prefix)

@app.get("/")
def read_root():
    return {"servicio": settings.app_title, "estado": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
