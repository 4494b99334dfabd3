from pydantic import BaseModel, ConfigDict, Field

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

class VideoRecord(BaseModel):
    """One normalized feed entry. Every field is always present."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    title: str = ""
    author: str = "Unknown"
    link: str = ""
    published_at: str = Field(default="", alias="publishedAt")
    thumbnail: str = ""
    description: str = ""

    def to_api(self) -> dict:
        return self.model_dump(by_alias=True)
