import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import ALLOWED_ORIGINS, HOST, PORT, logger
from routers import nyota

app = FastAPI(
    title="Nyota — Tanzania Travel Assistant",
    description="Rule-based chat replies and templated safari itineraries for the Nyota site",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"]
)

app.include_router(nyota.router)


@app.get("/")
def root():
    return {
        "status":  "ok",
        "message": "Nyota API is running",
        "docs":    "/docs"
    }


if __name__ == "__main__":
    logger.info("Nyota server running on http://localhost:%d", PORT)
    uvicorn.run(app, host=HOST, port=PORT)
