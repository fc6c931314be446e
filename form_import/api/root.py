from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Form Import Service",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "import": "/forms/import",
    }
