"""
NoteLens FastAPI Application

A REST API server over the NoteLens analysis engines.
Callers post the user's notes and receive insights, a mind map or advice.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from notelens import __version__
from notelens.config import Config
from notelens.core.layout import MindMapLayoutEngine
from notelens.models import Insight, InsightType, MindMapGraph, Note
from notelens.services import AdviceService, InsightEngine, filter_insights
from notelens.utils import NoteLensError, ValidationError, get_logger, setup_logging

# Global engine instances
insight_engine: InsightEngine | None = None
layout_engine: MindMapLayoutEngine | None = None
advice_service: AdviceService | None = None
logger = get_logger(__name__)


# Pydantic models for API
class NotesRequest(BaseModel):
    """Request model carrying the user's notes."""

    model_config = ConfigDict(populate_by_name=True)

    notes: list[Note] = Field(default_factory=list, description="Notes to analyze")
    user_id: str | None = Field(
        default=None,
        alias="userId",
        description="Requesting user; defaults to the owner shared by the notes",
    )


class AdviceResponse(BaseModel):
    """Response model for advice."""

    show: bool
    advice: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    engine_initialized: bool
    version: str


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    global insight_engine, layout_engine, advice_service

    # Load configuration from environment or use defaults
    config = Config.from_env()

    setup_logging(config.logging)

    logger.info("Starting NoteLens server")
    logger.info(
        f"Configuration: connection_threshold={config.insights.connection_threshold}, "
        f"exact_parity={config.similarity.exact_parity}, "
        f"advice_interval_hours={config.advice.interval_hours}"
    )

    insight_engine = InsightEngine(config)
    layout_engine = MindMapLayoutEngine(config.mindmap)
    advice_service = AdviceService(config.advice)
    logger.info("NoteLens engines initialized")

    yield

    logger.info("Shutting down NoteLens server")
    insight_engine = None
    layout_engine = None
    advice_service = None


# Create FastAPI app
app = FastAPI(
    title="NoteLens API",
    description="Insights and mind maps for structured voice notes",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Report malformed note collections as unprocessable input."""
    return JSONResponse(status_code=422, content={"detail": exc.message, "context": exc.context})


# Health check endpoint
@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy" if insight_engine else "initializing",
        engine_initialized=insight_engine is not None,
        version=__version__,
    )


@app.post("/insights", response_model=list[Insight])
def get_insights(
    request: NotesRequest,
    type: InsightType | None = Query(default=None, description="Only return one insight type"),
):
    """
    Derive insights from the posted notes.

    Insights are ordered by descending average relevance and include:
    - Thematic connections between similar notes
    - Action items recurring across notes
    - Categories trending over the last 30 days
    """
    if not insight_engine:
        raise HTTPException(status_code=503, detail="Engine not initialized")

    try:
        insights = insight_engine.analyze(request.notes)
        return filter_insights(insights, type)
    except ValidationError:
        raise
    except NoteLensError as e:
        logger.error(f"Error analyzing notes: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e


@app.post("/mindmap", response_model=MindMapGraph)
def get_mind_map(request: NotesRequest):
    """
    Build the mind map for the posted notes.

    The graph holds a center node, the most frequent categories, keywords
    and open action items, the notes of each category, and links between
    notes sharing keywords.
    """
    if not layout_engine:
        raise HTTPException(status_code=503, detail="Engine not initialized")

    return layout_engine.layout(request.notes)


@app.post("/advice", response_model=AdviceResponse)
def get_advice(request: NotesRequest):
    """
    Today's advice, if due.

    Advice is issued at most once per configured interval and user;
    otherwise show is false.
    """
    if not advice_service:
        raise HTTPException(status_code=503, detail="Engine not initialized")

    try:
        advice = advice_service.daily_advice(request.notes, user_id=request.user_id)
    except ValidationError:
        raise
    except NoteLensError as e:
        logger.error(f"Error generating advice: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e

    return AdviceResponse(show=advice is not None, advice=advice)
