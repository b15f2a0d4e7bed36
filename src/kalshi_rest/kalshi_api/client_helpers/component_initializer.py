"""Initialize KalshiClient components."""

from typing import Any, Callable, Dict

from ..authentication import AuthenticationHelper
from ..order_operations import OrderOperations
from ..portfolio_operations import PortfolioOperations
from ..request_builder import RequestBuilder
from ..request_executor import RequestExecutor
from ..response_parser import ResponseParser
from ..session import Session
from ..session_manager import SessionManager


class ComponentInitializer:
    """Initialize all helper components for KalshiClient."""

    def __init__(self, config):
        """Initialize with config."""
        self.config = config

    def initialize(self, session_provider: Callable[[], Session]) -> Dict[str, Any]:
        """Wire the transport, builder, parser and operation helpers together."""
        session_manager = SessionManager(self.config)
        executor = RequestExecutor(session_manager)
        request_builder = RequestBuilder(session_provider, executor)
        response_parser = ResponseParser()
        auth_helper = AuthenticationHelper(request_builder, response_parser)
        order_ops = OrderOperations(request_builder, response_parser)
        portfolio_ops = PortfolioOperations(request_builder, response_parser)

        return {
            "session_manager": session_manager,
            "executor": executor,
            "request_builder": request_builder,
            "response_parser": response_parser,
            "auth_helper": auth_helper,
            "order_ops": order_ops,
            "portfolio_ops": portfolio_ops,
        }
