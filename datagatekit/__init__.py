from datagatekit.orchestrator import GateOrchestrator
from datagatekit.config import Config, GateSettings

__all__ = ["GateOrchestrator", "Config", "GateSettings"]
