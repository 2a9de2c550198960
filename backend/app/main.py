from fastapi import FastAPI, Depends
from fastapi.responses import PlainTextResponse
from app.core.config import Settings, get_settings
from app.routes.sun_route import router as sun_router

app = FastAPI(title=get_settings().APP_NAME)
app.include_router(sun_router)

# --- Root Endpoint ---
@app.get("/", response_class=PlainTextResponse)
async def root():
    return "It works!"

@app.get("/hello", response_class=PlainTextResponse)
async def hello():
    return "Hello, world!"

# --- Health Check ---
@app.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "service": settings.APP_NAME,
        "upstream_configured": settings.upstream_configured,
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
