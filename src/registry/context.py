from pydantic import BaseModel, ConfigDict

from registry.config import Config
from registry.store import KeyValueStore


class AppContext(BaseModel):
    """Per-invocation dependencies handed to every request handler."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    config: Config
    store: KeyValueStore | None = None
