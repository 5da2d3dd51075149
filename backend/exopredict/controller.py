"""Per-action state for the form UI.

Predict and analyze each keep their own ActionState and never share it.
In-flight calls are not cancelled: whichever response settles last
overwrites the result of its own action.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import httpx

from .form import FormValidationError, PredictionForm
from .schemas import PredictionResponse, StarAnalysisResponse

logger = logging.getLogger(__name__)

PREDICT_FAILED = "Error al realizar la predicción. Por favor intenta nuevamente."
ANALYZE_FAILED = "No se pudo analizar la estrella. Por favor intenta nuevamente."

IDLE, LOADING, SUCCESS, ERROR = "idle", "loading", "success", "error"


@dataclass
class ActionState:
    outcome: str = IDLE
    result: Optional[Any] = None
    error: Optional[str] = None
    pending: int = 0

    @property
    def loading(self) -> bool:
        return self.pending > 0

    @property
    def status(self) -> str:
        return LOADING if self.loading else self.outcome

    def start(self) -> None:
        self.pending += 1
        self.result = None
        self.error = None

    def succeed(self, result: Any) -> None:
        self.result = result
        self.error = None
        self.outcome = SUCCESS

    def fail(self, message: str) -> None:
        self.result = None
        self.error = message
        self.outcome = ERROR

    def settle(self) -> None:
        self.pending -= 1


class FormController:
    """Drives the two gateway calls on behalf of the UI.

    `client` must be an httpx.AsyncClient whose base URL points at this
    application's gateway routes.
    """

    def __init__(self, client: httpx.AsyncClient, form: Optional[PredictionForm] = None):
        self.client = client
        self.form = form or PredictionForm()
        self.prediction = ActionState()
        self.analysis = ActionState()
        self.validation_errors: dict = {}

    def change(self, name: str, value: str) -> None:
        self.form.update(name, value)

    async def submit_prediction(self) -> ActionState:
        state = self.prediction
        self.validation_errors = {}
        try:
            payload = self.form.build_payload()
        except FormValidationError as e:
            self.validation_errors = e.errors
            state.fail(PREDICT_FAILED)
            return state

        state.start()
        try:
            r = await self.client.post("/api/predict", json=payload)
            r.raise_for_status()
            state.succeed(PredictionResponse.model_validate(r.json()))
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"prediction failed: {e}")
            state.fail(PREDICT_FAILED)
        finally:
            state.settle()
        return state

    async def analyze_star(self, star_id: str) -> ActionState:
        state = self.analysis
        state.start()
        try:
            r = await self.client.get("/api/analyze-star/" + quote(star_id.strip(), safe=""))
            r.raise_for_status()
            state.succeed(StarAnalysisResponse.model_validate(r.json()))
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"star analysis failed for {star_id!r}: {e}")
            state.fail(ANALYZE_FAILED)
        finally:
            state.settle()
        return state
