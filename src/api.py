from typing import Optional
from fastapi import Depends, FastAPI, Query
from fastapi.responses import JSONResponse
from src.config import settings
from src.providers.youtube import YouTubeFeedProvider
from src.services.analytics import build_snapshot
from src.utils.logger import logger

app = FastAPI(title="YouTube Feed Analytics")

def get_provider() -> YouTubeFeedProvider:
    return YouTubeFeedProvider()

def _failure(error: str, exc: Exception) -> JSONResponse:
    logger.warning(f"{error}: {exc}")
    return JSONResponse({"error": error, "details": str(exc)}, status_code=500)

@app.get("/api/trending")
def trending(
    region: Optional[str] = Query(None),
    provider: YouTubeFeedProvider = Depends(get_provider),
):
    try:
        videos = provider.get_trending(region if region is not None else settings.DEFAULT_REGION)
    except Exception as e:
        return _failure("Failed to load trending videos", e)
    return {"videos": [v.to_api() for v in videos]}

@app.get("/api/channel")
def channel(
    channel_id: Optional[str] = Query(None, alias="channelId"),
    provider: YouTubeFeedProvider = Depends(get_provider),
):
    channel_id = (channel_id or "").strip()
    if not channel_id:
        return JSONResponse({"error": "Missing channelId parameter"}, status_code=400)

    try:
        videos = provider.get_channel_latest(channel_id)
    except Exception as e:
        return _failure("Failed to load channel feed", e)

    snapshot = build_snapshot(videos)
    return {
        "videos": [v.to_api() for v in videos],
        "analytics": snapshot.model_dump(by_alias=True, exclude={"videos"}),
    }

def run():
    import uvicorn
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)

if __name__ == "__main__":
    run()
