"""Fixed configuration: API constants and rendering settings."""

from pydantic import BaseModel, ConfigDict, PositiveInt

from repo_info import __version__

API_BASE_URL = "https://api.github.com"
ACCEPT_HEADER = "application/vnd.github+json"
USER_AGENT = f"repo-info/{__version__}"
REQUEST_TIMEOUT = 30.0


class RenderSettings(BaseModel):
    """Column widths and fallbacks used by the renderer."""

    model_config = ConfigDict(frozen=True)

    text_width: PositiveInt = 30  # reserved for name + percentage columns
    fallback_width: PositiveInt = 60
    min_bar_width: PositiveInt = 10
    name_width: PositiveInt = 15
    percentage_width: PositiveInt = 7
    bar_char: str = "■"


DEFAULT_SETTINGS = RenderSettings()
