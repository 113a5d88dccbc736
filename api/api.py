import json
import logging
from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from starlette.datastructures import UploadFile

from api.dependencies import get_auth_service, get_media_client
from domain.enums.social_formats import SocialFormat, DEFAULT_FORMAT
from domain.schemas.rendition_schema import FormatOut, RenditionResponse
from services.rendition_service import RenditionService
from services.upload_service import InvalidUploadError, UploadService

logger = logging.getLogger(__name__)

router = APIRouter()

TEMPLATE_PATH = Path(__file__).parent / "templates" / "social_share.html"


def _resolve_format(key: str) -> SocialFormat:
    try:
        return SocialFormat.lookup(key)
    except KeyError:
        raise HTTPException(400, f"Invalid format. Options: {', '.join(fmt.name for fmt in SocialFormat)}")


@router.post("/api/image-upload")
async def image_upload(
        request: Request,
        auth_service=Depends(get_auth_service),
        media_client=Depends(get_media_client)
):
    user_id = await auth_service.get_user_from_token(request)
    if not user_id:
        return JSONResponse({"error": "Unauthorized"}, status_code=401)

    form = await request.form()
    file = form.get("file")
    if not isinstance(file, UploadFile):
        return JSONResponse({"error": "File not found"}, status_code=400)

    try:
        public_id = await UploadService(media_client).upload(file)
    except InvalidUploadError as e:
        return JSONResponse({"error": e.message}, status_code=e.status_code)
    except Exception:
        logger.exception("Image Uploading failed")
        return JSONResponse({"error": "Image Uploading failed"}, status_code=500)

    return JSONResponse({"publicId": public_id}, status_code=200)


@router.get("/api/formats", response_model=List[FormatOut])
async def list_formats():
    return RenditionService.list_formats()


@router.get("/api/rendition", response_model=RenditionResponse)
async def get_rendition(
        public_id: str = Query(..., min_length=1, description="Id returned by the upload endpoint"),
        format: str = Query(DEFAULT_FORMAT.name, description="Format name or label"),
        media_client=Depends(get_media_client)
):
    """
    Devuelve los parámetros de recorte y la URL de entrega para un formato.

    El recorte siempre es `fill` con gravedad `auto`; el servicio de medios
    genera la imagen al pedir la URL.
    """
    return RenditionService(media_client).describe(public_id, _resolve_format(format))


@router.get("/api/download")
def download_rendition(
        public_id: str = Query(..., min_length=1),
        format: str = Query(DEFAULT_FORMAT.name),
        media_client=Depends(get_media_client)
):
    fmt = _resolve_format(format)
    content, filename, content_type = RenditionService(media_client).download(public_id, fmt)
    return Response(
        content=content,
        media_type=content_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )


@router.get("/social-share", response_class=HTMLResponse)
async def social_share_page():
    formats = [fmt.model_dump() for fmt in RenditionService.list_formats()]
    html = TEMPLATE_PATH.read_text(encoding="utf-8")
    return html.replace("__FORMATS_JSON__", json.dumps(formats))
