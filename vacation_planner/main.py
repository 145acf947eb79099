# vacation_planner/main.py

import datetime
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Form, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from vacation_planner import config
from vacation_planner.core.errors import ConfigurationError, PlannerError
from vacation_planner.core.models import VacationRequest
from vacation_planner.itinerary import plan
from vacation_planner.log import setup_logging
from vacation_planner.services.packing import PackingStore

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    app.state.store = None
    if config.DATABASE_URL:
        try:
            app.state.store = PackingStore.connect(config.DATABASE_URL)
        except PlannerError:
            logger.exception("Packing-item database unavailable, results will fail")
    else:
        logger.warning("DATABASE_URL not set, results will fail")
    yield
    if app.state.store is not None:
        app.state.store.close()


app = FastAPI(lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in config.ALLOWED_ORIGINS.split(",")],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")


# Search form fields
class VacationForm(BaseModel):
    city: str
    start_date: datetime.date
    end_date: datetime.date
    activity_type: str
    vacation_type: str


def get_store(request: Request) -> PackingStore | None:
    return getattr(request.app.state, "store", None)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return PlainTextResponse("404", status_code=404)
    return await http_exception_handler(request, exc)


@app.get("/")
@app.get("/result")
def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {})


@app.get("/about")
def about(request: Request):
    return templates.TemplateResponse(request, "pages/about.html", {})


@app.post("/")
def results(
    request: Request,
    city: str = Form(""),
    start_date: str = Form(""),
    end_date: str = Form(""),
    activity_type: str = Form(""),
    vacation_type: str = Form(""),
    store: PackingStore | None = Depends(get_store),
):
    try:
        form = VacationForm(
            city=city,
            start_date=start_date,
            end_date=end_date,
            activity_type=activity_type,
            vacation_type=vacation_type,
        )
        if store is None:
            raise ConfigurationError("DATABASE_URL missing or empty.")

        itinerary = plan(
            VacationRequest(**form.model_dump()),
            store,
            user=getattr(request.state, "user", None),
        )
        return templates.TemplateResponse(request, "pages/result.html", {"itinerary": itinerary})
    except (PlannerError, ValidationError) as err:
        logger.warning("Request for %r failed: %s", city, err)
        return error_page(request, err)


def error_page(request: Request, err: Exception):
    return templates.TemplateResponse(request, "pages/error.html", {"err": str(err)}, status_code=500)
