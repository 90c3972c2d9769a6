# /ministry-dashboard-backend/app/routers/uploads_router.py

from fastapi import APIRouter, HTTPException, status, UploadFile, File, Response

from ..models.upload_model import ImagePreview
from ..services import image_service

router = APIRouter()


@router.post("/preview", response_model=ImagePreview, status_code=status.HTTP_201_CREATED, summary="Register an Image Preview")
def create_preview(file: UploadFile = File(...)):
    if not image_service.is_valid_image(file):
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Please select a valid image file (JPEG, PNG, or WebP)",
        )
    size_mb = image_service.get_file_size_in_mb(file)
    if size_mb > image_service.MAX_IMAGE_SIZE_MB:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Image size must be less than {image_service.MAX_IMAGE_SIZE_MB}MB",
        )
    preview_url = image_service.create_image_preview(file)
    return ImagePreview(previewUrl=preview_url, sizeMB=size_mb, contentType=file.content_type)


@router.get("/preview/{ref}", summary="Fetch a Registered Image Preview")
def get_preview(ref: str):
    entry = image_service.preview_registry.get(ref)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Preview not found")
    return Response(content=entry.content, media_type=entry.content_type)


@router.delete("/preview/{ref}", status_code=status.HTTP_204_NO_CONTENT, summary="Revoke an Image Preview")
def revoke_preview(ref: str):
    if not image_service.revoke_image_preview(ref):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Preview not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
