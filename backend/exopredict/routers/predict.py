import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..schemas import ErrorOut
from ..upstream import UpstreamClient, UpstreamError, get_upstream

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["predict"])

REJECTED = "Error en la predicción"
FAILED = "Error al realizar la predicción"

@router.post("/predict", responses={500: {"model": ErrorOut}})
async def predict(request: Request, upstream: UpstreamClient = Depends(get_upstream)):
    try:
        body = await request.json()
        if not isinstance(body, dict):
            raise ValueError("prediction body must be a JSON object")
        data = await upstream.predict(body)
        return JSONResponse(data)
    except UpstreamError as e:
        return JSONResponse(
            ErrorOut(error=REJECTED, details=e.text).model_dump(),
            status_code=e.status_code,
        )
    except Exception:
        logger.exception("Error calling prediction API")
        return JSONResponse(ErrorOut(error=FAILED).model_dump(exclude_none=True), status_code=500)
