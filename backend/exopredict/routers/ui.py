from pathlib import Path

import httpx
from fastapi import APIRouter, Request
from fastapi.templating import Jinja2Templates

from ..controller import FormController
from ..form import ALL_FIELDS, EXTENDED_FIELDS, OPTIONAL_FIELDS, REQUIRED_FIELDS, PredictionForm, format_parameter, interpretation

router = APIRouter(include_in_schema=False)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))
templates.env.filters["param"] = format_parameter


def _gateway_client(request: Request) -> httpx.AsyncClient:
    # UI -> gateway hop stays in-process through this same app
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=request.app), base_url="http://gateway")


async def _read_form(request: Request):
    data = await request.form()
    values = {k: str(v) for k, v in data.items() if k in ALL_FIELDS}
    return PredictionForm(values), str(data.get("star_id", ""))


def _render(request: Request, ctl: FormController, star_id: str = ""):
    prediction = ctl.prediction.result
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "form": ctl.form,
            "groups": [
                ("⭐ Parámetros Obligatorios", REQUIRED_FIELDS),
                ("🎯 Calidad de Señal y Detección", [f for f in OPTIONAL_FIELDS if f.group == "signal"]),
                ("📍 Coordenadas Celestiales", [f for f in OPTIONAL_FIELDS if f.group == "coords"]),
                ("🔭 Parámetros Adicionales", EXTENDED_FIELDS),
            ],
            "prediction": ctl.prediction,
            "interpretation": interpretation(prediction.predicted_label) if prediction else None,
            "field_errors": ctl.validation_errors,
            "analysis": ctl.analysis,
            "star_id": star_id,
        },
    )


@router.get("/")
async def index(request: Request):
    async with _gateway_client(request) as client:
        return _render(request, FormController(client))


@router.post("/")
async def submit_prediction(request: Request):
    form, star_id = await _read_form(request)
    async with _gateway_client(request) as client:
        ctl = FormController(client, form)
        await ctl.submit_prediction()
        return _render(request, ctl, star_id)


@router.post("/analyze")
async def submit_analysis(request: Request):
    form, star_id = await _read_form(request)
    async with _gateway_client(request) as client:
        ctl = FormController(client, form)
        await ctl.analyze_star(star_id)
        return _render(request, ctl, star_id)
