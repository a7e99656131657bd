"""
Catalog HTTP API.

Thin routing over CatalogStore. Store failures come back as plain text with
the status their `kind` maps to; successful reads are JSON.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from backend.corpus import StoreConfig
from backend.store import SERVER_ERROR, CatalogError, CatalogStore
from models import FaqList, Product, ProductList, PromoList

logger = logging.getLogger(__name__)

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

router = APIRouter()


def get_store(request: Request) -> CatalogStore:
    return request.app.state.store


@router.get("/products", response_model=ProductList)
def list_products(store: CatalogStore = Depends(get_store)) -> ProductList:
    return store.list_products()


@router.get("/filter/{category}", response_model=ProductList)
def filter_products(category: str, store: CatalogStore = Depends(get_store)) -> ProductList:
    return store.filter_by_category(category)


@router.get("/single/{product_id}", response_model=Product)
def get_product(product_id: str, store: CatalogStore = Depends(get_store)) -> Product:
    return store.get_by_id(product_id)


@router.get("/faqs", response_model=FaqList)
def list_faqs(store: CatalogStore = Depends(get_store)) -> FaqList:
    return store.list_faqs()


@router.get("/promos", response_model=PromoList)
def list_promos(store: CatalogStore = Depends(get_store)) -> PromoList:
    return store.list_promos()


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return str(value)


async def _read_body_fields(request: Request) -> dict[str, Any]:
    """
    Parse a JSON, urlencoded, or multipart body into a flat dict.
    Anything unparseable yields {} so the store reports missing parameters.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError as exc:
            logger.warning("Ignoring malformed JSON body: %s", exc)
            return {}
        return body if isinstance(body, dict) else {}
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form = await request.form()
        # Uploaded files are not form fields we know about.
        return {key: value for key, value in form.items() if isinstance(value, str)}
    return {}


@router.post("/info", response_class=PlainTextResponse)
async def submit_info(request: Request, store: CatalogStore = Depends(get_store)) -> str:
    fields = await _read_body_fields(request)
    logger.info("Received submission: %s", fields)
    return await run_in_threadpool(
        store.submit_feedback,
        _as_text(fields.get("name")),
        _as_text(fields.get("email")),
        _as_text(fields.get("feedback")),
        _as_text(fields.get("phone")),
    )


async def handle_catalog_error(request: Request, exc: CatalogError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.kind.status_code)


async def handle_unexpected_error(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return PlainTextResponse(SERVER_ERROR, status_code=500)


def create_app(config: StoreConfig | None = None) -> FastAPI:
    """Build the app around one CatalogStore; static files are served when the directory exists."""
    config = config or StoreConfig.from_env()

    app = FastAPI(title="Product Catalog API")
    app.state.store = CatalogStore(config)
    app.add_exception_handler(CatalogError, handle_catalog_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
    app.include_router(router)

    # Mounted last so API routes win.
    if config.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="static")
    else:
        logger.info("Static directory %s not found; serving API only", config.static_dir)

    return app


app = create_app()
