from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from blogapi.services.image_service import ImageService

router = APIRouter(prefix="/image", tags=["images"])


def _get_service(request: Request) -> ImageService:
    svc = getattr(getattr(request.app, "state", None), "image_service", None)
    if not svc:
        raise RuntimeError("ImageService not configured")
    return svc


@router.get("/{image_id}", response_class=PlainTextResponse)
def get_image(image_id: int, request: Request):
    return PlainTextResponse(_get_service(request).get_image_data_uri(image_id))
