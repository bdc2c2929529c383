# =============================================================================
# app/routers/admin_products.py - Product Creation Endpoint
# =============================================================================
# Receives the admin "create product" form and runs it through
# CreateProductPipeline. Navigation decisions are made here:
#   - no signed-in user      -> redirect to "/"
#   - product stored         -> redirect to "/admin/products"
#   - any step failed        -> 400 {"message": "..."}
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.concurrency import run_in_threadpool

from app.auth import AuthUser, get_current_user_optional
from app.dependencies import CreateProductDep
from core.models.product import ImageFile
from core.models.results import ActionMessage, Unauthenticated
from core.validation import MAX_IMAGE_SIZE_BYTES

logger = logging.getLogger(__name__)

router = APIRouter()

HOME_ROUTE = "/"
ADMIN_PRODUCTS_ROUTE = "/admin/products"


async def _read_image(upload: UploadFile | None) -> ImageFile | None:
    """
    Convert the multipart upload into an ImageFile.

    Browsers send an empty, unnamed part when no file was chosen; that
    counts as no image. At most one byte past the size limit is read, which
    is enough for validation to reject an oversized file.
    """
    if upload is None or not upload.filename:
        return None

    content = await upload.read(MAX_IMAGE_SIZE_BYTES + 1)
    if len(content) > MAX_IMAGE_SIZE_BYTES:
        logger.info(f"Upload {upload.filename!r} exceeds {MAX_IMAGE_SIZE_BYTES} bytes; stopped reading")
    return ImageFile(
        filename=upload.filename,
        content_type=upload.content_type or "",
        content=content,
    )


@router.post(
    "/products",
    responses={
        303: {"description": "Created (to /admin/products) or not signed in (to /)"},
        400: {"description": "Validation, storage or database failure"},
    },
)
async def create_product(
    pipeline: CreateProductDep,
    user: Annotated[AuthUser | None, Depends(get_current_user_optional)],
    name: Annotated[str | None, Form()] = None,
    company: Annotated[str | None, Form()] = None,
    price: Annotated[str | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    featured: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
):
    """
    Create a product from the admin form.

    The image must be at most 1MB and have an image/* content type.
    All field problems are reported together in `message`, separated by ", ".
    """
    image_file = await _read_image(image)
    form = {
        "name": name,
        "company": company,
        "price": price,
        "description": description,
        "featured": featured,
    }

    result = await run_in_threadpool(pipeline.run, user, form, image_file)

    if isinstance(result, Unauthenticated):
        return RedirectResponse(url=HOME_ROUTE, status_code=303)

    if isinstance(result, ActionMessage):
        return JSONResponse(status_code=400, content=result.to_dict())

    return RedirectResponse(url=ADMIN_PRODUCTS_ROUTE, status_code=303)
