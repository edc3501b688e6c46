import logging

from fastapi import FastAPI

from lateral_trend.api.routes import router as api_router
from lateral_trend.config import get_settings

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Lateral Trend API", version="0.1.0")
app.include_router(api_router)


@app.get("/health")
def health():
    return {
        "status": "ok",
        "app_env": settings.app_env,
        "provider_config": settings.provider,
        "max_pct_change": settings.max_pct_change,
        "strategy": settings.strategy.value,
    }
