"""HTTP services for Daybook."""

from .server import OrjsonResponse, build_server_config, create_app, run_local_server

__all__ = ["OrjsonResponse", "build_server_config", "create_app", "run_local_server"]
