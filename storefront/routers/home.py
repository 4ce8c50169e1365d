# storefront/routers/home.py
from fastapi import APIRouter, Depends

from storefront.core.auth import get_visitor
from storefront.models.product import CATEGORIES
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.product import CategoryFilter, HomePage
from storefront.services.catalog_service import ALL_CATEGORIES, CatalogService
from storefront.state.visitor import Visitor

router = APIRouter(prefix="/home", tags=["Home"])

repo = ProductRepository()
service = CatalogService(repo)


@router.get("", response_model=HomePage)
def home(
    category: CategoryFilter = ALL_CATEGORIES,
    visitor: Visitor = Depends(get_visitor),
):
    """
    Browse products.

    - Public endpoint.
    - `category=all` (default) lists everything; any other value lists
      only that category.
    """
    products = service.list_products(visitor.client, visitor.notifier, category)
    return HomePage(
        categories=[ALL_CATEGORIES, *CATEGORIES],
        selected_category=category,
        products=products,
        notifications=visitor.notifier.drain(),
    )
