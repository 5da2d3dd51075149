import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..schemas import ErrorOut
from ..upstream import UpstreamClient, UpstreamError, get_upstream

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/analyze-star", tags=["analyze"])

MISSING_ID = "Se requiere un ID de estrella"
NOT_FOUND = "No se encontró la curva de luz para esta estrella"
FAILED = "Error al analizar la estrella"

def _missing_id() -> JSONResponse:
    return JSONResponse(ErrorOut(error=MISSING_ID).model_dump(exclude_none=True), status_code=400)

@router.get("", include_in_schema=False)
@router.get("/", include_in_schema=False)
async def analyze_without_id():
    return _missing_id()

@router.get("/{star_id:path}", responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}})
async def analyze_star(star_id: str, upstream: UpstreamClient = Depends(get_upstream)):
    star_id = star_id.strip()
    if not star_id:
        return _missing_id()
    try:
        data = await upstream.analyze_star(star_id)
        return JSONResponse(data)
    except UpstreamError as e:
        return JSONResponse(
            ErrorOut(error=NOT_FOUND, details=e.text).model_dump(),
            status_code=e.status_code,
        )
    except Exception:
        logger.exception("Error calling star analysis API")
        return JSONResponse(ErrorOut(error=FAILED).model_dump(exclude_none=True), status_code=500)
