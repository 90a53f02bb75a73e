# =============================================================================
# app/routers/info.py - Application Info Endpoint
# =============================================================================
# Reports name, version, environment and runtime version.
# =============================================================================

import platform

from pydantic import BaseModel, ConfigDict, Field

from app.dependencies import SettingsDep
from app.routing import ExpressRouter

router = ExpressRouter()


def runtime_version() -> str:
    """Interpreter version in the "v<major>.<minor>.<patch>" form, e.g. "v3.12.4"."""
    return f"v{platform.python_version()}"


class InfoResponse(BaseModel):
    """Application info response (camelCase on the wire)."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    version: str
    environment: str
    node_version: str = Field(alias="nodeVersion")


@router.get("/info", response_model=InfoResponse)
async def get_info(settings: SettingsDep):
    """
    Get application info.

    The environment comes from ENVIRONMENT (or NODE_ENV) and defaults
    to "development".
    """
    return InfoResponse(
        name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        node_version=runtime_version(),
    )
