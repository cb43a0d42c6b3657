from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.requests.api_colors import router as colors_router
from config.logging_config import apply_logging_config
from palette_engine.config import ALLOWED_ORIGINS, ENVIRONMENT
from setup_logging_optimized import get_logger

logging_config = apply_logging_config()
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(title="Brand Palette API")

allowed_origins = set(ALLOWED_ORIGINS)

if ENVIRONMENT != "production":
    # In non-production, also allow localhost and common dev ports
    allowed_origins.update(
        {
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        }
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=sorted(allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(colors_router)


@app.get("/health")
def health():
    return {"status": "ok", "environment": ENVIRONMENT}


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Brand Palette API ({logging_config['environment']})")
    uvicorn.run("api.color_server:app", host="0.0.0.0", port=8000, reload=ENVIRONMENT != "production")
