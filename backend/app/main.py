from io import BytesIO

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from backend.app.render import forms_html, solution_html
from linegraph import build_equation, config, solve
from linegraph.errors import EquationError
from linegraph.graph import build_figure
from linegraph.logging_config import get_logger, setup_logging

setup_logging(config.LOG_LEVEL)
logger = get_logger("api")

app = FastAPI(title="LineGraph API", version=config.VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class PlotRequest(BaseModel):
    equation1: str = ""
    equation2: str = ""
    theme: str = config.DEFAULT_THEME


class EquationRequest(BaseModel):
    equation: str


class StepInfo(BaseModel):
    description: str
    expression: str


class CanonicalInfo(BaseModel):
    a: float
    b: float
    c: float
    has_decimal: bool


class InterceptInfo(BaseModel):
    x: float | None = None
    y: float | None = None


class PointInfo(BaseModel):
    x: float
    y: float


class EquationInfo(BaseModel):
    index: int
    raw: str
    status: str
    error: str | None = None
    equation: CanonicalInfo | None = None
    use_decimal: bool
    standard_form: str
    slope_form: str
    intercepts: InterceptInfo
    x_intercept_steps: list[StepInfo]
    y_intercept_steps: list[StepInfo]
    forms_html: str = ""


class IntersectionInfo(BaseModel):
    status: str
    use_decimal: bool
    point: PointInfo | None = None
    steps: list[StepInfo]
    message: str


class DirectiveInfo(BaseModel):
    kind: str
    name: str
    x: list[float]
    y: list[float]
    size: int | None = None


class ViewportInfo(BaseModel):
    x_min: float
    x_max: float
    y_min: float
    y_max: float


class PlotResponse(BaseModel):
    equations: list[EquationInfo]
    intersection: IntersectionInfo | None = None
    directives: list[DirectiveInfo]
    viewport: ViewportInfo
    html: str


@app.post("/api/plot", response_model=PlotResponse)
def plot(req: PlotRequest):
    try:
        result = solve(req.equation1, req.equation2)
    except Exception as e:
        logger.exception("Solver failed")
        raise HTTPException(status_code=500, detail=f"Solver error: {str(e)}")

    payload = result.to_dict()
    for info, sol in zip(payload["equations"], result.equations):
        info["forms_html"] = forms_html(sol)
    payload["html"] = solution_html(result)
    return payload


@app.post("/api/plot.png")
def plot_png(req: PlotRequest):
    try:
        result = solve(req.equation1, req.equation2)
        fig = build_figure(result, req.theme)
    except Exception as e:
        logger.exception("Plot rendering failed")
        raise HTTPException(status_code=500, detail=f"Plot error: {str(e)}")

    buf = BytesIO()
    fig.savefig(buf, format="png", facecolor=fig.get_facecolor())
    return Response(content=buf.getvalue(), media_type="image/png")


@app.post("/api/parse", response_model=CanonicalInfo)
def parse(req: EquationRequest):
    equation = req.equation.strip()
    if not equation:
        raise HTTPException(status_code=400, detail="Equation cannot be empty.")

    try:
        eq = build_equation(equation)
    except EquationError as e:
        raise HTTPException(status_code=400, detail=e.user_message)

    return eq.to_dict()
