from fastapi import FastAPI

from casaluna.core.config import Settings
from casaluna.services.pricing_router import router as pricing_router

settings = Settings()
app = FastAPI(title=settings.project_name)


@app.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "ok"}


def configure_routes() -> None:
    app.include_router(pricing_router)


configure_routes()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
