from fastapi import FastAPI
from fastapi.responses import Response
from dotenv import load_dotenv
from .router import router as keygen_router
from .obs.prom import prometheus_latest

load_dotenv()

app = FastAPI(title="sshkeygen")
app.include_router(keygen_router)

@app.get("/__health")
async def health():
    return {"status": "ok"}

@app.get("/metrics")
async def metrics():
    body, content_type = prometheus_latest()
    return Response(content=body, media_type=content_type)
