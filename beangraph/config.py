"""Configuration for bean visitors.

Visitor configuration can be built explicitly or read from environment
variables, mirroring the way traversal limits are configured elsewhere.

Environment Variables:
    BEANGRAPH_VISITOR_VISIT_NULLS: Descend into unset relations (default: "false")
    BEANGRAPH_VISITOR_VISIT_INVERSES: Follow inverse relations (default: "false")
    BEANGRAPH_VISITOR_VECTOR_CYCLIC_DETECTION: Use vector cycle keys (default: "false")
    BEANGRAPH_VISITOR_ACCEPT_VISITED: Report suppressed repeats (default: "false")
    BEANGRAPH_VISITOR_MAX_DEPTH: Maximum traversal depth, 0 = unlimited (default: "0")
    BEANGRAPH_VISITOR_MAX_STEPS: Maximum positions entered, 0 = unlimited (default: "0")
"""

import logging
import os

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 0
DEFAULT_MAX_STEPS = 0


class VisitorConfig(BaseModel):
    """Configuration model for a BeanVisitor.

    Attributes:
        visit_nulls: Visit relations that are not populated
        visit_inverses: Visit inverse (weakly referenced) relations
        vector_cyclic_detection: Allow revisiting a bean through a different relation
        accept_visited: Call back once more for suppressed repeats
        max_depth: Maximum traversal depth (0 = unlimited)
        max_steps: Maximum positions entered per visit (0 = unlimited)
    """

    visit_nulls: bool = False
    visit_inverses: bool = False
    vector_cyclic_detection: bool = False
    accept_visited: bool = False

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=0)
    max_steps: int = Field(default=DEFAULT_MAX_STEPS, ge=0)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("true", "1", "yes")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: {raw!r}, using {default}")
        return default


def get_visitor_config() -> VisitorConfig:
    """Get visitor configuration from environment variables and defaults.

    Returns:
        VisitorConfig built from the BEANGRAPH_VISITOR_* environment variables
    """
    return VisitorConfig(
        visit_nulls=_env_flag("BEANGRAPH_VISITOR_VISIT_NULLS"),
        visit_inverses=_env_flag("BEANGRAPH_VISITOR_VISIT_INVERSES"),
        vector_cyclic_detection=_env_flag("BEANGRAPH_VISITOR_VECTOR_CYCLIC_DETECTION"),
        accept_visited=_env_flag("BEANGRAPH_VISITOR_ACCEPT_VISITED"),
        max_depth=max(0, _env_int("BEANGRAPH_VISITOR_MAX_DEPTH", DEFAULT_MAX_DEPTH)),
        max_steps=max(0, _env_int("BEANGRAPH_VISITOR_MAX_STEPS", DEFAULT_MAX_STEPS)),
    )


__all__ = ["VisitorConfig", "get_visitor_config", "DEFAULT_MAX_DEPTH", "DEFAULT_MAX_STEPS"]
