"""PredictStore - Predictions API.

HTTP surface over the prediction store. Response bodies always use the
``{success, data?, error?}`` shape; the status code reflects the failure kind.
"""

import base64
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from predictstore.core.exceptions import StoreError
from predictstore.models.result import StoreErrorKind, StoreResult
from predictstore.ports.storage import PredictionStoragePort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/predictions", tags=["Predictions"])

# Firestore bytes fields are not valid UTF-8 in general
_RESPONSE_ENCODERS = {bytes: lambda value: base64.b64encode(value).decode("ascii")}

_STATUS_BY_KIND = {
    StoreErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    StoreErrorKind.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    StoreErrorKind.REMOTE_FAILURE: status.HTTP_502_BAD_GATEWAY,
}


def get_prediction_store(request: Request) -> PredictionStoragePort:
    """Get the store constructed during application startup."""
    store: PredictionStoragePort | None = getattr(request.app.state, "store", None)
    if store is None:
        msg = "Prediction store is not initialized"
        raise StoreError(msg)
    return store


def to_response(result: StoreResult) -> JSONResponse:
    if result.success or result.error_kind is None:
        status_code = status.HTTP_200_OK
    else:
        status_code = _STATUS_BY_KIND[result.error_kind]
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(result.to_dict(), custom_encoder=_RESPONSE_ENCODERS),
    )


@router.put(
    "/{prediction_id}",
    summary="Store Prediction",
    description="Create the prediction document, or replace it entirely if it exists.",
)
async def store_prediction(
    prediction_id: str,
    payload: dict[str, Any] = Body(...),
    store: PredictionStoragePort = Depends(get_prediction_store),
) -> JSONResponse:
    logger.debug("PUT prediction %s", prediction_id)
    return to_response(await store.store_data(prediction_id, payload))


@router.get(
    "/{prediction_id}",
    summary="Get Prediction",
    description="Fetch a prediction document; 404 when it does not exist.",
)
async def get_prediction(
    prediction_id: str,
    store: PredictionStoragePort = Depends(get_prediction_store),
) -> JSONResponse:
    logger.debug("GET prediction %s", prediction_id)
    return to_response(await store.get_data(prediction_id))


@router.delete(
    "/{prediction_id}",
    summary="Delete Prediction",
    description="Delete a prediction document. Deleting a missing document succeeds.",
)
async def delete_prediction(
    prediction_id: str,
    store: PredictionStoragePort = Depends(get_prediction_store),
) -> JSONResponse:
    logger.debug("DELETE prediction %s", prediction_id)
    return to_response(await store.delete_data(prediction_id))
