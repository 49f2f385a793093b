from dotenv import load_dotenv; load_dotenv()
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pdi_site.config import configure_logging, cors_origins
from pdi_site.routes.deploy import router as deploy_router

configure_logging()

app = FastAPI(title="Pourdavoud Site API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(deploy_router, prefix="/api/deploy", tags=["deploy"])

@app.get("/healthz")
def healthz():
    return {"ok": True}
