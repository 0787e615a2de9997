from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.palette import router as palette_router
from .settings import API_PREFIX, CORS_ORIGINS

app = FastAPI(title="Swatch Palette Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(palette_router, prefix=API_PREFIX, tags=["palette"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
