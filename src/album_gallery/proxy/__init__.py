from .cache import TTLCache
from .service import AIProxyService, parse_tags

__all__ = ["TTLCache", "AIProxyService", "parse_tags"]
