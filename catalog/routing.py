import os
import pkgutil
from importlib import import_module

from fastapi import APIRouter

from catalog.logging import logger

# Track which modules have been registered to avoid duplicate logging
_registered_http_modules: set[str] = set()


def collect_subrouters() -> APIRouter:
    """
    Collects all HTTP routers of the application.

    Every module in ``catalog/api/http`` that defines a module-level
    ``router`` is imported and included in the returned ``APIRouter``.
    Helper modules without a router are skipped.
    """
    main_router: APIRouter = APIRouter()

    app_dir = os.path.dirname(__file__)
    app_name = os.path.basename(app_dir)

    for _, module, _ in pkgutil.iter_modules([f"{app_dir}/api/http"]):
        api = import_module(f".{module}", package=f"{app_name}.api.http")

        router = getattr(api, "router", None)
        if not isinstance(router, APIRouter):
            continue

        main_router.include_router(router)

        # Only log on first registration
        if module not in _registered_http_modules:
            logger.info(f'Register "{module}" api')
            _registered_http_modules.add(module)

    return main_router
