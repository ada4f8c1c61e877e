from .remote_control_service import JsEvent, RemoteControlService
from .remote_controller import RemoteControllerController

__all__ = ["JsEvent", "RemoteControlService", "RemoteControllerController"]
