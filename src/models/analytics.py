from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from src.models.video import VideoRecord

class ChannelSnapshot(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    videos: List[VideoRecord]
    latest_upload: Optional[str] = Field(default=None, alias="latestUpload")
    average_length: str = Field(alias="averageLength")
    upload_cadence: str = Field(alias="uploadCadence")
