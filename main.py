import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, field_validator

from modarith.constants import DEFAULT_MODULUS, PRIMITIVE_ROOTS, SUPPORTED_MODULI
from modarith.fps import FormalPowerSeries
from modarith.ntt import convolve

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("modarith.api")

app = FastAPI(title="modarith")


class ModulusInput(BaseModel):
    modulus: int = DEFAULT_MODULUS

    @field_validator("modulus")
    @classmethod
    def supported_modulus(cls, v):
        if v not in PRIMITIVE_ROOTS:
            raise ValueError(f"modulus must be one of {list(SUPPORTED_MODULI)}")
        return v


@app.get("/moduli")
def list_moduli():
    return {
        "moduli": [
            {"modulus": m, "primitive_root": PRIMITIVE_ROOTS[m]} for m in SUPPORTED_MODULI
        ]
    }


# convolution endpoint
class ConvolveInput(ModulusInput):
    f: List[int]
    g: List[int]


@app.post("/convolve")
def convolve_route(payload: ConvolveInput):
    result = convolve(payload.f, payload.g, payload.modulus)
    return {"modulus": payload.modulus, "result": result.tolist()}


# power series endpoints
class SeriesInput(ModulusInput):
    coeffs: List[int]
    degree: Optional[int] = Field(default=None, ge=0)


class PowerInput(SeriesInput):
    exponent: int = Field(ge=0)


def _series_result(series: FormalPowerSeries):
    return {"modulus": series.modulus, "result": series.values()}


@app.post("/fps/pow")
def fps_pow_route(payload: PowerInput):
    f = FormalPowerSeries(payload.coeffs, payload.modulus)
    try:
        return _series_result(f.pow(payload.exponent, payload.degree))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


FPS_OPERATIONS = {
    "inverse": FormalPowerSeries.inverse,
    "log": FormalPowerSeries.log,
    "exp": FormalPowerSeries.exp,
}


@app.post("/fps/{operation}")
def fps_route(operation: str, payload: SeriesInput):
    op = FPS_OPERATIONS.get(operation)
    if op is None:
        raise HTTPException(status_code=404, detail=f"Unknown operation {operation}")
    f = FormalPowerSeries(payload.coeffs, payload.modulus)
    try:
        result = op(f, payload.degree)
    except ValueError as e:
        logger.info("fps %s rejected: %s", operation, e)
        raise HTTPException(status_code=400, detail=str(e))
    return _series_result(result)
