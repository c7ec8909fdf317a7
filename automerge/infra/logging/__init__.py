from automerge.infra.logging.bound import BoundLogger
from automerge.infra.logging.console import ConsoleLogger
from automerge.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["BoundLogger", "ConsoleLogger", "LogfireLogger", "configure_logfire"]
