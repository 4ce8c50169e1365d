# storefront/main.py
from contextlib import asynccontextmanager
import logging
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException
from supabase import Client

from storefront.core.config import get_settings
from storefront.state.visitor import VisitorRegistry

# Routers
from storefront.routers.home import router as home_router
from storefront.routers.auth import router as auth_router
from storefront.routers.nav import router as nav_router
from storefront.routers.cart import router as cart_router
from storefront.routers.profile import router as profile_router
from storefront.routers.admin import router as admin_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Log which Supabase project the storefront talks to.

    Shutdown:
      - Dispose every visitor (unsubscribes their auth listeners).
    """
    logger.info(f"🔄 Startup: storefront using Supabase at {settings.SUPABASE_URL}")
    yield
    count = len(app.state.visitors)
    app.state.visitors.close_all()
    logger.info(f"✅ Shutdown: closed {count} visitor session(s).")


async def attach_visitor(request: Request, call_next):
    """
    Resolve the Visitor for API requests from the session cookie,
    creating a new one (and setting the cookie) when needed.
    """
    if not request.url.path.startswith(settings.API_V1_STR):
        return await call_next(request)

    registry: VisitorRegistry = request.app.state.visitors
    visitor = registry.get(request.cookies.get(settings.SESSION_COOKIE_NAME))
    is_new = visitor is None
    if is_new:
        # Creating a visitor reads the auth session: blocking I/O.
        visitor = await run_in_threadpool(registry.create)
    request.state.visitor = visitor

    response = await call_next(request)
    if is_new:
        response.set_cookie(
            settings.SESSION_COOKIE_NAME,
            visitor.id,
            httponly=True,
            samesite="lax",
            secure=settings.SESSION_COOKIE_SECURE,
        )
    return response


async def http_error_with_notifications(request: Request, exc: StarletteHTTPException):
    """
    Same as FastAPI's default HTTPException handler, plus the visitor's
    pending notifications (so error toasts reach the client once).
    """
    visitor = getattr(request.state, "visitor", None)
    notifications = visitor.notifier.drain() if visitor is not None else []
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "notifications": [n.model_dump() for n in notifications],
        },
        headers=getattr(exc, "headers", None),
    )


def create_application(
    client_factory: Callable[[], Client] | None = None,
    max_visitors: int | None = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        client_factory: creates the Supabase client for each new visitor.
            Defaults to a real anon-key client.
        max_visitors: visitor sessions kept in memory. Defaults to
            `MAX_VISITORS`.
    """
    if client_factory is None:
        from storefront.core.supabase_client import create_visitor_client

        client_factory = create_visitor_client

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.visitors = VisitorRegistry(
        client_factory,
        max_visitors=max_visitors or settings.MAX_VISITORS,
    )

    app.middleware("http")(attach_visitor)

    # --- CORS configuration ---
    # Outermost: answers CORS preflights before a visitor is resolved.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_error_with_notifications)

    # Versioned API prefix, e.g. /api/v1
    app.include_router(home_router, prefix=settings.API_V1_STR)
    app.include_router(auth_router, prefix=settings.API_V1_STR)
    app.include_router(nav_router, prefix=settings.API_V1_STR)
    app.include_router(cart_router, prefix=settings.API_V1_STR)
    app.include_router(profile_router, prefix=settings.API_V1_STR)
    app.include_router(admin_router, prefix=settings.API_V1_STR)

    @app.get("/")
    def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "vn-furniture-storefront"}

    return app


app = create_application()
