import os

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from fastapi.responses import FileResponse

from app.core.dependencies import get_current_active_user
from app.core.rate_limit import UPLOAD_LIMIT, limiter
from app.models import user_model
from app.schemas.image_schema import UploadedImage
from app.schemas.response_schema import ApiResponse
from app.services import image_service

router = APIRouter(
    prefix="",
    tags=["Images"],
)


@router.post(
    "/upload/image",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[UploadedImage],
)
@limiter.limit(UPLOAD_LIMIT)
async def upload_image(
    request: Request,
    image: UploadFile = File(...),
    _: user_model.User = Depends(get_current_active_user),
):
    filename, url = await image_service.save_image(image)
    return ApiResponse.ok(
        data=UploadedImage(url=url, filename=filename),
        message="Image uploaded successfully.",
    )


# Servir imagens (público: as URLs aparecem na listagem pública)
@router.get("/images/{filename}")
def serve_image(filename: str):
    path = image_service.image_path(filename)
    if not os.path.isfile(path):
        raise HTTPException(status_code=404, detail="Image not found.")
    return FileResponse(path=path)
