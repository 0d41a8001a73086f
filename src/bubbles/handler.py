"""Function entry point: authenticate, parse, append, respond."""

from functools import lru_cache
from typing import Any, Mapping, Optional

from .config import Config, load_config
from .exceptions import AuthenticationError, ConfigError, StoreError, ValidationError
from .logger import get_logger, set_level
from .models import Response
from .parser import parse_highlight
from .store import ContentStoreClient
from .workflow import ContentStore, append_highlight

logger = get_logger(__name__)


class RequestHandler:
    """Maps one highlight request to a response envelope."""

    def __init__(self, config: Config, store: Optional[ContentStore] = None):
        self.config = config
        self._store = store if store is not None else ContentStoreClient(config)

    def authenticate(self, args: Mapping[str, Any]) -> None:
        if args.get("token") != self.config.auth_secret:
            raise AuthenticationError("token does not match")

    def handle(self, args: Mapping[str, Any]) -> Response:
        try:
            self.authenticate(args)
        except AuthenticationError as e:
            logger.warning(f"Rejected request: {e}")
            return Response(status_code=403)

        try:
            highlight = parse_highlight(args)
        except ValidationError as e:
            logger.warning(f"Received bad request: {e}")
            return Response(status_code=400, body=str(e))

        try:
            append_highlight(
                highlight,
                self._store,
                retries=self.config.conflict_retries,
                branch=self.config.branch,
            )
        except StoreError:
            # Already logged with status and body where it was detected
            return Response(status_code=500)

        return Response(status_code=201)


@lru_cache(maxsize=1)
def _default_handler() -> RequestHandler:
    config = load_config()
    set_level(config.log_level)
    return RequestHandler(config)


def main(args: Mapping[str, Any]) -> dict:
    """Serverless entry point.

    The handler, and with it the config and HTTP session, is built on the
    first call and reused for the lifetime of the process.
    """
    try:
        handler = _default_handler()
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return Response(status_code=500).to_dict()
    return handler.handle(args).to_dict()
