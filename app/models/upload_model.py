# /ministry-dashboard-backend/app/models/upload_model.py

from pydantic import BaseModel, Field


class ImagePreview(BaseModel):
    """
    Defines the data contract for a registered image preview. The preview URL
    is only meaningful to this server process and must be revoked by the
    client once the preview is no longer displayed.
    """
    previewUrl: str = Field(..., description="Opaque blob: reference to the uploaded bytes.", examples=["blob:3f0c9c4e-..."])
    sizeMB: float = Field(..., ge=0)
    contentType: str
