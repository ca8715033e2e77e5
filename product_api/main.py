# product_api/main.py
from contextlib import asynccontextmanager
from typing import Optional, Dict, Any

from fastapi import APIRouter, Depends, FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from . import __version__
from .config import Settings, get_settings
from .core import (
    category_stats, filter_by_category, make_product, merge_product,
    paginate, search_products,
)
from .database import ProductStore
from .error_handlers import register_error_handlers
from .errors import NotFoundError
from .logger import get_logger, setup_logging
from .middleware import get_store, log_requests, validated_product

logger = get_logger("routes")

router = APIRouter(prefix="/api/products")

# ---------------------------
# Read endpoints
# ---------------------------
@router.get("")
@router.get("/", include_in_schema=False)
async def list_products(
    category: Optional[str] = None,
    page: int = 1,
    limit: int = 10,
    store: ProductStore = Depends(get_store),
):
    filtered = filter_by_category(store.list_all(), category)
    result = paginate(filtered, page, limit)
    result["products"] = [p.to_json() for p in result["products"]]
    return result

# search and stats are declared before /{product_id} so they are not taken as ids
@router.get("/search")
async def search(q: Optional[str] = None, store: ProductStore = Depends(get_store)):
    return [p.to_json() for p in search_products(store.list_all(), q)]

@router.get("/stats")
async def stats(store: ProductStore = Depends(get_store)):
    return category_stats(store.list_all())

@router.get("/{product_id}")
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    p = store.find_by_id(product_id)
    if p is None:
        raise NotFoundError.for_product(product_id)
    return p.to_json()

# ---------------------------
# Write endpoints
# ---------------------------
@router.post("", status_code=201)
@router.post("/", status_code=201, include_in_schema=False)
async def create_product(
    body: Dict[str, Any] = Depends(validated_product),
    store: ProductStore = Depends(get_store),
):
    product = store.insert(make_product(body))
    logger.info("created product %s", product.id)
    return product.to_json()

@router.put("/{product_id}")
async def update_product(
    product_id: str,
    body: Dict[str, Any] = Depends(validated_product),
    store: ProductStore = Depends(get_store),
):
    existing = store.find_by_id(product_id)
    if existing is None:
        raise NotFoundError.for_product(product_id, "update")
    product = store.replace(product_id, merge_product(existing, body))
    logger.info("updated product %s", product_id)
    return product.to_json()

@router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    store.remove_by_id(product_id)
    logger.info("deleted product %s", product_id)
    return Response(status_code=204)

# ---------------------------
# App factory
# ---------------------------
def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("product API started with %d seeded products", len(app.state.store))
        yield
        logger.info("product API shutting down")

    app = FastAPI(title="product-api (in-memory catalog)", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    register_error_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    async def welcome():
        return "Welcome to the Product API! Go to /api/products to see all products."

    app.include_router(router)
    return app


app = create_app()
