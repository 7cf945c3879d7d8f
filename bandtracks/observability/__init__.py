# noqa: D104 - package initialization
from .logging import configure_structured_logging  # noqa: F401
from .metrics import metrics_blueprint, record_favorite_toggle, record_search_cache_hit, record_search_cache_miss  # noqa: F401
