"""Map tool requests onto command lines and shape the outcome into a response."""

from functools import partial
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple

from pydantic import BaseModel, ValidationError

from . import catalogue as names
from .catalogue import CATALOGUE, ToolCatalogue
from .commands import CommandBuilder, CommandLine
from .config import HomeConfig
from .exceptions import ToolNotFoundError, ToolValidationError, UnknownToolError
from .execution import ProcessInvoker
from .logger import get_logger
from .models import (
    ControlDeviceArgs,
    InvocationOutcome,
    ListShortcutsArgs,
    NoArgs,
    RoomArgs,
    SceneArgs,
    ThermostatArgs,
    ToolDefinition,
    ToolRequest,
    ToolResponse,
)
from .responses import format_number, guidance, hard_result, list_result, soft_result, unit_symbol

logger = get_logger(__name__)

ACTIVATE_HOME_SCRIPT = 'tell application "Home" to activate'
STATUS_NOTE = (
    "Home app opened. Note: HomeKit device status is not accessible via AppleScript. View status in the Home app."
)
SET_THERMOSTAT = "Set Thermostat"

Handler = Callable[[Any], ToolResponse]


class ToolDispatcher:
    """
    Routes a ``ToolRequest`` to the handler for its operation.

    Every call produces exactly one ``ToolResponse``. Invocation failures are
    resolved by the per-operation policy; anything raised while handling a
    request is caught once in ``dispatch`` and reported as an error response.
    The dispatcher holds no state between calls.
    """

    def __init__(
        self,
        config: Optional[HomeConfig] = None,
        invoker: Optional[ProcessInvoker] = None,
        catalogue: ToolCatalogue = CATALOGUE,
    ):
        """Initialize the dispatcher.

        Args:
            config: Program names and invocation limits. Defaults to ``HomeConfig()``.
            invoker: Process invoker to run command lines with. Built from ``config`` when omitted.
            catalogue: The tools to serve; requests for names outside it are unknown.
        """
        self.config = config or HomeConfig()
        self.catalogue = catalogue
        self._builder = CommandBuilder(self.config)
        self._invoker = invoker or ProcessInvoker(self.config)
        handlers: dict[str, Handler] = {
            names.HOME_OPEN: self._open,
            names.HOME_RUN_SCENE: self._run_scene,
            names.HOME_CONTROL_DEVICE: self._control_device,
            names.HOME_LIST_SHORTCUTS: self._list_shortcuts,
            names.HOME_LIGHTS_ON: partial(self._lights, "on"),
            names.HOME_LIGHTS_OFF: partial(self._lights, "off"),
            names.HOME_SET_THERMOSTAT: self._set_thermostat,
            names.HOME_LOCK_DOORS: partial(self._doors, "lock"),
            names.HOME_UNLOCK_DOORS: partial(self._doors, "unlock"),
            names.HOME_GET_STATUS: self._get_status,
        }
        self._handlers: Mapping[str, Handler] = MappingProxyType(
            {name: handler for name, handler in handlers.items() if name in catalogue}
        )

    def dispatch(self, request: ToolRequest) -> ToolResponse:
        """Handle one request to completion.

        Args:
            request: The operation name and its raw arguments.

        Returns:
            The response for the caller. Never raises.
        """
        logger.info("Dispatching tool '%s'.", request.name)
        try:
            tool, handler = self._resolve(request.name)
            args = self._extract(tool, request.arguments or {})
            return handler(args)
        except UnknownToolError as e:
            logger.warning(str(e))
            return ToolResponse.error(str(e))
        except ToolValidationError as e:
            logger.warning("Rejected arguments for '%s': %s", request.name, e)
            return ToolResponse.error(f"Error: {e}")
        except Exception as e:
            logger.error("Unexpected error handling tool '%s': %s", request.name, e, exc_info=True)
            return ToolResponse.error(f"Error: {e}")

    def _resolve(self, name: str) -> Tuple[ToolDefinition, Handler]:
        try:
            tool = self.catalogue.get(name)
        except ToolNotFoundError:
            raise UnknownToolError(name) from None
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownToolError(name)
        return tool, handler

    def _run(self, command: CommandLine) -> InvocationOutcome:
        outcome = self._invoker.run(command)
        if outcome.failed:
            logger.info("Invocation of %s failed: %s", command.program.value, outcome.diagnostic)
        else:
            logger.debug("Invocation of %s printed: %s", command.program.value, outcome.text)
        return outcome

    @staticmethod
    def _extract(tool: ToolDefinition, arguments: Mapping[str, Any]) -> BaseModel:
        tool_name = tool.name
        try:
            return tool.args_model.model_validate(dict(arguments))
        except ValidationError as e:
            missing = [".".join(str(p) for p in err["loc"]) for err in e.errors() if err["type"] == "missing"]
            if missing:
                msg = f"Missing required argument(s) for tool '{tool_name}': {', '.join(missing)}"
            else:
                details = "; ".join(
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
                )
                msg = f"Invalid arguments for tool '{tool_name}': {details}"
            raise ToolValidationError(msg) from e

    # --- Script operations ---

    def _open(self, args: NoArgs) -> ToolResponse:
        outcome = self._run(self._builder.script(ACTIVATE_HOME_SCRIPT))
        return hard_result(outcome, "Home app opened", lambda d: f"Error: AppleScript error: {d}")

    def _get_status(self, args: NoArgs) -> ToolResponse:
        outcome = self._run(self._builder.script(ACTIVATE_HOME_SCRIPT))
        return hard_result(outcome, STATUS_NOTE, lambda d: f"Error: AppleScript error: {d}")

    # --- Arbitrary automations ---

    def _control_device(self, args: ControlDeviceArgs) -> ToolResponse:
        outcome = self._run(self._builder.run_automation(args.shortcutName, args.action))
        success = f"Executed shortcut: {args.shortcutName}"
        if args.action:
            success += f" with action: {args.action}"
        return hard_result(outcome, success, lambda d: f'Error running shortcut "{args.shortcutName}": {d}')

    def _list_shortcuts(self, args: ListShortcutsArgs) -> ToolResponse:
        return list_result(self._run(self._builder.list_automations()), args.filter)

    # --- Quick actions ---

    def _run_scene(self, args: SceneArgs) -> ToolResponse:
        scene = args.scene
        return soft_result(
            self._run(self._builder.run_automation(scene)),
            f"Activated scene: {scene}",
            guidance(f'To run scene "{scene}", please create a Shortcut with that name that activates the HomeKit scene.'),
        )

    def _lights(self, state: str, args: RoomArgs) -> ToolResponse:
        room = args.room

        # Room names are used verbatim: "living room Lights On"
        automation = f"{room} Lights {state.title()}" if room else f"Lights {state.title()}"
        where = f" in {room}" if room else ""
        phrase = f"turn {state} {room} lights" if room else f"turn {state} the lights"

        return soft_result(
            self._run(self._builder.run_automation(automation)),
            f"Lights {state}{where}",
            guidance(
                f'To turn {state} lights{where}, create a Shortcut named "{automation}" that controls your HomeKit lights.',
                phrase,
            ),
        )

    def _set_thermostat(self, args: ThermostatArgs) -> ToolResponse:
        temperature = format_number(args.temperature)
        payload = f"{temperature} degrees {args.unit}"
        display = f"{temperature}°{unit_symbol(args.unit)}"

        return soft_result(
            self._run(self._builder.run_automation(SET_THERMOSTAT, payload)),
            f"Thermostat set to {display}",
            guidance(
                f'To set thermostat to {display}, create a Shortcut named "{SET_THERMOSTAT}" '
                "that controls your HomeKit thermostat.",
                f"Set the thermostat to {payload}",
            ),
        )

    def _doors(self, action: str, args: NoArgs) -> ToolResponse:
        automation = f"{action.title()} Doors"
        return soft_result(
            self._run(self._builder.run_automation(automation)),
            f"Doors {action}ed",
            guidance(
                f'To {action} doors, create a Shortcut named "{automation}" that controls your HomeKit locks.',
                f"{action.title()} all doors",
            ),
        )
