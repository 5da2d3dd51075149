"""Form field catalogue and payload construction for the prediction form.

Values are held as the raw text typed by the user. Only non-empty fields
end up in the payload, parsed to float; empty fields are left out rather
than sent as 0 or null.
"""
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from .schemas import CANDIDATE, CONFIRMED

@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    default: str = ""
    required: bool = False
    group: str = "required"
    integer_flag: bool = False  # 0/1 false-positive flag

REQUIRED_FIELDS: List[FieldSpec] = [
    FieldSpec("period", "Período Orbital (días)", "8.7", True),
    FieldSpec("duration", "Duración del Tránsito (horas)", "3.1", True),
    FieldSpec("transit_depth", "Profundidad del Tránsito (ppm)", "450.0", True),
    FieldSpec("planet_radius", "Radio del Planeta (R⊕)", "2.1", True),
    FieldSpec("eq_temp", "Temperatura de Equilibrio (K)", "950", True),
    FieldSpec("insol_flux", "Flujo de Insolación (F⊕)", "210.0", True),
    FieldSpec("stellar_eff_temp", "Temperatura Efectiva Estelar (K)", "5750", True),
    FieldSpec("stellar_logg", "Gravedad Estelar (log g)", "4.5", True),
    FieldSpec("stellar_radius", "Radio Estelar (R☉)", "1.0", True),
]

OPTIONAL_FIELDS: List[FieldSpec] = [
    FieldSpec("koi_model_snr", "Señal a Ruido (SNR)", group="signal"),
    FieldSpec("koi_fpflag_nt", "¿Señal no es tránsito? (0/1)", group="signal", integer_flag=True),
    FieldSpec("koi_fpflag_ss", "¿Indica eclipse estelar? (0/1)", group="signal", integer_flag=True),
    FieldSpec("koi_fpflag_co", "¿Centroide desplazado? (0/1)", group="signal", integer_flag=True),
    FieldSpec("ra", "Ascensión Recta (RA)", group="coords"),
    FieldSpec("dec", "Declinación (Dec)", group="coords"),
]

EXTENDED_FIELDS: List[FieldSpec] = [
    FieldSpec("koi_impact", "Parámetro de Impacto", group="extended"),
    FieldSpec("koi_kepmag", "Magnitud Kepler", group="extended"),
    FieldSpec("stellar_dist", "Distancia Estelar (pc)", group="extended"),
]

ALL_FIELDS: Dict[str, FieldSpec] = {f.name: f for f in REQUIRED_FIELDS + OPTIONAL_FIELDS + EXTENDED_FIELDS}

INTERPRETATIONS = {
    CANDIDATE: "🌟 Este exoplaneta es un candidato prometedor para habitabilidad. Se requiere más investigación.",
    CONFIRMED: "✅ Este exoplaneta ha sido confirmado con alta probabilidad de condiciones habitables.",
}


class FormValidationError(ValueError):
    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors


def parse_number(text: str) -> float:
    """Parse user text into a finite float, rejecting nan/inf."""
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


class PredictionForm:
    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = {f.name: f.default for f in REQUIRED_FIELDS}
        for name, value in (values or {}).items():
            self.update(name, value)

    def update(self, name: str, value: str) -> None:
        if name not in ALL_FIELDS:
            raise KeyError(name)
        self.values[name] = value

    def get(self, name: str) -> str:
        return self.values.get(name, "")

    def build_payload(self) -> Dict[str, float]:
        payload: Dict[str, float] = {}
        errors: Dict[str, str] = {}
        for name in ALL_FIELDS:
            text = (self.values.get(name) or "").strip()
            if not text:
                continue
            try:
                value = parse_number(text)
            except ValueError:
                errors[name] = "valor numérico inválido"
                continue
            payload[name] = value
        if errors:
            raise FormValidationError(errors)
        return payload


def interpretation(label: str) -> Optional[str]:
    return INTERPRETATIONS.get(label)


def format_parameter(value: float) -> str:
    return f"{value:.4f}"
