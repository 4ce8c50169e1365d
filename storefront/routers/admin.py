# storefront/routers/admin.py
from fastapi import APIRouter, Depends, File, UploadFile, status

from storefront.core.auth import get_visitor, require_admin
from storefront.models.product import CATEGORIES
from storefront.models.user import StorefrontUser
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.admin import AdminPage, ImageUploadRead
from storefront.schemas.product import ProductCreate
from storefront.services.admin_service import AdminService
from storefront.state.visitor import Visitor

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(require_admin)],
)

repo = ProductRepository()
service = AdminService(repo)


def render_admin(visitor: Visitor) -> AdminPage:
    form = visitor.admin_form
    return AdminPage(
        form=form.read(),
        categories=list(CATEGORIES),
        products=form.products,
        notifications=visitor.notifier.drain(),
    )


@router.get("", response_model=AdminPage)
def admin_dashboard(visitor: Visitor = Depends(get_visitor)):
    """
    Admin dashboard: the product form and all products, newest first.

    Guests are redirected to login; non-admins get 403.
    """
    service.load_products(visitor.client, visitor.admin_form, visitor.notifier)
    return render_admin(visitor)


@router.post(
    "/products",
    response_model=AdminPage,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    payload: ProductCreate,
    visitor: Visitor = Depends(get_visitor),
    current_user: StorefrontUser = Depends(require_admin),
):
    """
    Create a product from the form (admin only).

    The image must have been uploaded through `/admin/image` first.
    """
    service.create_product(
        visitor.client,
        visitor.admin_form,
        visitor.notifier,
        current_user,
        payload,
    )
    return render_admin(visitor)


@router.delete("/products/{product_id}", response_model=AdminPage)
def delete_product(product_id: str, visitor: Visitor = Depends(get_visitor)):
    """
    Delete a product and (best-effort) its image (admin only).
    """
    service.delete_product(
        visitor.client,
        visitor.admin_form,
        visitor.notifier,
        product_id,
    )
    return render_admin(visitor)


@router.post(
    "/image",
    response_model=ImageUploadRead,
    summary="Upload the product image for the form",
)
def upload_image(
    file: UploadFile = File(...),
    visitor: Visitor = Depends(get_visitor),
):
    """
    Upload one image for the product form.

    - Accepts any image/* content type.
    - Replacing an image does not delete the previous upload.
    """
    file_bytes = file.file.read()
    url = visitor.admin_form.dropzone.accept(
        file.filename or "",
        file.content_type,
        file_bytes,
    )
    return ImageUploadRead(url=url, notifications=visitor.notifier.drain())


@router.delete("/image", response_model=ImageUploadRead)
def clear_image(visitor: Visitor = Depends(get_visitor)):
    """
    Clear the form image. The stored object stays in the bucket.
    """
    visitor.admin_form.dropzone.clear()
    return ImageUploadRead(url="", notifications=visitor.notifier.drain())
