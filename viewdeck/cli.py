import json

import click
from pydantic import ValidationError


def _session():
    from viewdeck.workspace.app import create_session

    return create_session()


def _echo_json(data: object) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@click.group()
@click.option("--log-level", default=None, help="Log level (default: from VIEWDECK_LOG_LEVEL or INFO).")
@click.option("--log-json", is_flag=True, default=False, help="Write JSON log records (or set VIEWDECK_LOG_JSON).")
def main(log_level: str | None, log_json: bool) -> None:
    """Viewdeck - preview a web page across many device viewports."""
    from viewdeck.workspace.log import setup_logging
    from viewdeck.workspace.settings import get_settings

    settings = get_settings()
    setup_logging(log_level or settings.log_level, json_logs=log_json or settings.log_json)


@main.command()
def state() -> None:
    """Print the initial workspace snapshot as JSON."""
    click.echo(_session().state.model_dump_json(indent=2))


@main.command()
@click.argument("kind")
@click.argument("payload", required=False, default="{}")
def dispatch(kind: str, payload: str) -> None:
    """Apply one event of KIND with a JSON PAYLOAD and print the new snapshot."""
    from viewdeck.workspace.models.events import parse_event

    try:
        body = json.loads(payload)
    except json.JSONDecodeError as exc:
        msg = f"PAYLOAD is not valid JSON: {exc}"
        raise click.BadParameter(msg, param_hint="PAYLOAD") from None
    if not isinstance(body, dict):
        msg = "PAYLOAD must be a JSON object"
        raise click.BadParameter(msg, param_hint="PAYLOAD")

    try:
        event = parse_event({**body, "kind": kind})
    except ValidationError as exc:
        raise click.BadParameter(str(exc), param_hint="PAYLOAD") from None
    if event is None:
        msg = f"Unknown event kind '{kind}'"
        raise click.UsageError(msg)

    click.echo(_session().dispatch(event).model_dump_json(indent=2))


# ---------------------------------------------------------------------------
# Devices
# ---------------------------------------------------------------------------


@main.group()
def devices() -> None:
    """Inspect and manage device profiles."""


@devices.command("list")
@click.option("--active", is_flag=True, default=False, help="Only list active devices.")
@click.option("--os", "os_filter", multiple=True, help="Keep devices with this OS (repeatable).")
@click.option("--type", "type_filter", multiple=True, help="Keep devices of this type (repeatable).")
def list_devices(active: bool, os_filter: tuple[str, ...], type_filter: tuple[str, ...]) -> None:
    """List catalog (or active) devices."""
    from viewdeck.workspace.catalog import filter_devices
    from viewdeck.workspace.models.enums import FilterField

    snapshot = _session().state
    selected = snapshot.devices if active else snapshot.all_devices
    selected = filter_devices(selected, {FilterField.OS: list(os_filter), FilterField.DEVICE_TYPE: list(type_filter)})
    _echo_json([d.model_dump(mode="json") for d in selected])


@devices.command()
@click.argument("names", nargs=-1, required=True)
def activate(names: tuple[str, ...]) -> None:
    """Make NAMES the active devices, in the given order."""
    from viewdeck.workspace.models.events import SetActiveDevices

    session = _session()
    chosen = []
    for name in names:
        device = session.context.catalog.find(name)
        if device is None:
            msg = f"Unknown device '{name}'"
            raise click.UsageError(msg)
        chosen.append(device)

    snapshot = session.dispatch(SetActiveDevices(devices=chosen))
    _echo_json([d.name for d in snapshot.devices])


@devices.command("add-custom")
@click.argument("descriptor")
def add_custom(descriptor: str) -> None:
    """Add a custom device from a JSON DESCRIPTOR."""
    from viewdeck.workspace.models.device import Device
    from viewdeck.workspace.models.events import AddCustomDevice

    try:
        device = Device.model_validate_json(descriptor)
    except ValidationError as exc:
        raise click.BadParameter(str(exc), param_hint="DESCRIPTOR") from None

    _session().dispatch(AddCustomDevice(device=device))
    click.echo(f"Custom device added: {device.name}")


@devices.command("remove-custom")
@click.argument("device_id")
def remove_custom(device_id: str) -> None:
    """Remove the custom device with DEVICE_ID."""
    from viewdeck.workspace.models.events import DeleteCustomDevice

    _session().dispatch(DeleteCustomDevice(device_id=device_id))
    click.echo(f"Custom device removed: {device_id}")


# ---------------------------------------------------------------------------
# Persisted settings
# ---------------------------------------------------------------------------


_RESETTABLE = ["active-devices", "user-preferences", "custom-devices", "homepage"]


@main.command()
@click.argument("keys", nargs=-1, type=click.Choice(_RESETTABLE))
def reset(keys: tuple[str, ...]) -> None:
    """Forget persisted KEYS (all workspace keys when none are given)."""
    from viewdeck.workspace.app import create_store
    from viewdeck.workspace.settings import get_settings
    from viewdeck.workspace.store.base import PERSISTED_KEYS

    store = create_store(get_settings())
    for key in keys or PERSISTED_KEYS:
        if not store.has(key):
            continue
        store.delete(key)
        click.echo(f"Reset {key}")


# ---------------------------------------------------------------------------
# Inspector geometry
# ---------------------------------------------------------------------------


@main.command()
@click.argument("mode", type=click.Choice(["BOTTOM", "RIGHT", "UNDOCKED"], case_sensitive=False))
@click.option("--width", type=float, default=None, help="Inspector width (default: mode's default size).")
@click.option("--height", type=float, default=None, help="Inspector height (default: mode's default size).")
def bounds(mode: str, width: float | None, height: float | None) -> None:
    """Print inspector window bounds for MODE on the configured screen."""
    from viewdeck.workspace.geometry import InspectorGeometry
    from viewdeck.workspace.models.enums import DisplayMode
    from viewdeck.workspace.models.state import WindowSize
    from viewdeck.workspace.settings import get_settings

    settings = get_settings()
    geometry = InspectorGeometry(WindowSize(width=settings.screen_width, height=settings.screen_height))
    display_mode = DisplayMode(mode.upper())

    size = None
    if width is not None or height is not None:
        default = geometry.default_size(display_mode)
        size = WindowSize(
            width=default.width if width is None else width,
            height=default.height if height is None else height,
        )
    click.echo(geometry.bounds(display_mode, size).model_dump_json(indent=2))


if __name__ == "__main__":
    main()
