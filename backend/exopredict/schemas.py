from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict

# Label strings returned by the classifier
CANDIDATE = "Candidato"
CONFIRMED = "Confirmado"

class PredictionResponse(BaseModel):
    model_config = ConfigDict(extra="allow")
    predicted_label: str
    confidence: str
    probabilities: Dict[str, str]

class StarParameters(BaseModel):
    model_config = ConfigDict(extra="allow")
    period: float
    duration: float
    transit_time: float

class StarAnalysisResponse(BaseModel):
    model_config = ConfigDict(extra="allow")
    star_id: str
    image_url: str
    message: str
    parameters: StarParameters

class ErrorOut(BaseModel):
    error: str
    details: Optional[str] = None
