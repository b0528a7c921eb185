import logging

import sentry_sdk
from dotenv import load_dotenv
from fastapi import FastAPI

from ats_scorer.api.v1.ats import router as ats_router
from ats_scorer.api.v1.health import router as health_router
from ats_scorer.core.config import settings

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="ATS Scorer API", version="0.1.0")

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(ats_router, prefix="/v1", tags=["ATS"])
