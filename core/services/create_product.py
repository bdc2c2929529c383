# =============================================================================
# core/services/create_product.py - Create Product Pipeline
# =============================================================================
# One product submission runs these steps in order:
#
#   UNAUTHENTICATED -> AUTHENTICATED -> FIELDS_VALIDATED -> IMAGE_VALIDATED
#                   -> UPLOADED -> PERSISTED
#
# Any failure jumps to ERROR and stops the remaining steps. Failures are
# logged here and reduced to a single message for the form; nothing is
# raised to the caller. A missing identity and a successful insert are
# returned as Unauthenticated / Created so the HTTP layer can redirect.
#
# Known gap: if the upload succeeds and the insert then fails, the uploaded
# image stays in the bucket. There is no compensating delete.
# =============================================================================

import logging
from enum import Enum
from typing import Any, Mapping

from app.auth.models import AuthUser
from app.exceptions import StorefrontException
from core.models.product import ImageFile
from core.models.results import (
    ActionMessage,
    Created,
    CreateProductResult,
    Unauthenticated,
)
from core.services.product_service import ProductService
from core.services.storage_service import StorageService
from core.validation import ImageFields, ProductFields, validate_fields

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to create product"
MISSING_IMAGE_MESSAGE = "image is required"

PRODUCT_FORM_FIELDS = ("name", "company", "price", "description", "featured")


class PipelineStage(str, Enum):
    """Last step a create request reached."""
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"
    FIELDS_VALIDATED = "fields_validated"
    IMAGE_VALIDATED = "image_validated"
    UPLOADED = "uploaded"
    PERSISTED = "persisted"
    ERROR = "error"


class CreateProductPipeline:
    """
    Orchestrates validation, image upload and persistence for one product.

    The pipeline holds no per-request state; run() may be called
    concurrently from different requests.
    """

    def __init__(self, products: ProductService, storage: StorageService):
        self.products = products
        self.storage = storage

    def run(
        self,
        user: AuthUser | None,
        form: Mapping[str, Any],
        image: ImageFile | None,
    ) -> CreateProductResult:
        """
        Create a product from a submitted form.

        Args:
            user: The caller, or None when not signed in
            form: Raw form values (name, company, price, description, featured)
            image: The uploaded image, or None if the form had none

        Returns:
            Unauthenticated: No caller identity; nothing was attempted
            ActionMessage: A step failed; the message explains why
            Created: The product was stored
        """
        if user is None:
            logger.info("Create product rejected: no authenticated user")
            return Unauthenticated()

        stage = PipelineStage.AUTHENTICATED
        try:
            fields = validate_fields(
                ProductFields,
                {key: form.get(key) for key in PRODUCT_FORM_FIELDS},
            )
            stage = PipelineStage.FIELDS_VALIDATED

            checked = validate_fields(ImageFields, {"image": image})
            if checked.image is None:
                return self._fail(stage, MISSING_IMAGE_MESSAGE)
            stage = PipelineStage.IMAGE_VALIDATED

            image_url = self.storage.upload_image(checked.image.file)
            stage = PipelineStage.UPLOADED

            product = self.products.create_product(
                fields,
                owner_id=str(user.id),
                image_url=image_url,
            )
            stage = PipelineStage.PERSISTED

        except StorefrontException as e:
            return self._fail(stage, e.message)
        except Exception as e:
            logger.exception(f"Unexpected error creating product after {stage.value}: {e}")
            return ActionMessage(DEFAULT_ERROR_MESSAGE)

        logger.info(f"Product {product.id} created by {user.id} ({stage.value})")
        return Created(product)

    def _fail(self, stage: PipelineStage, message: str) -> ActionMessage:
        logger.error(f"Create product {stage.value} -> {PipelineStage.ERROR.value}: {message}")
        if stage == PipelineStage.UPLOADED:
            logger.warning("Uploaded image was left in storage after the failed insert")
        return ActionMessage(message or DEFAULT_ERROR_MESSAGE)
