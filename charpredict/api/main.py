from fastapi import FastAPI
from contextlib import asynccontextmanager
from charpredict.api.routes import router
from charpredict.logger import get_logger
from charpredict.services import get_engine

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # a bad table raises here and the app refuses to start
    engine = get_engine()
    logger.info("API ready", extra={"metrics": {"top_k": engine.top_k}})
    yield

app = FastAPI(title="charpredict", lifespan=lifespan)
app.include_router(router)


@app.get("/")
def home():
    return {"ok": True, "app": "charpredict"}
