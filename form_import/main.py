import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from form_import.api.forms import router as forms_router
from form_import.api.health import router as health_router
from form_import.api.root import router as root_router
from form_import.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Form Import Service")

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(forms_router)
