"""Test opening and closing the calendar overlay."""

import datetime

from blockdate import config
from blockdate.model import blocks, events, host, listeners, overlay

from conftest import FakeCalendar


def _date_field(workspace: blocks.Workspace, value: str = "2024-03-01"):
    field = workspace.new_block("date_value").get_field("DATE")
    field.set_value(value)
    return field


def test_activate_opens_overlay(
    workspace: blocks.Workspace, slot: host.WidgetSlot
) -> None:
    """Activation renders one seeded calendar in the slot."""
    # Arrange
    field = _date_field(workspace)
    # Act
    field.activate()
    # Assert
    picker = FakeCalendar.created[-1]
    assert field.overlay_state == overlay.OverlayState.OPEN
    assert slot.is_owner(field)
    assert slot.container.children == [picker]
    assert picker.date == datetime.date(2024, 3, 1)
    assert not picker.allow_none
    assert not picker.show_week_num
    assert picker.listener_count(overlay.CHANGE) == 1
    assert isinstance(field.subscription_token, listeners.ListenerKey)


def test_picker_options_follow_settings(workspace: blocks.Workspace) -> None:
    # Arrange
    config.settings.allow_none = True
    config.settings.show_week_num = True
    # Act
    _date_field(workspace).activate()
    # Assert
    picker = FakeCalendar.created[-1]
    assert picker.allow_none
    assert picker.show_week_num


def test_activate_twice_keeps_one_subscription(
    workspace: blocks.Workspace, slot: host.WidgetSlot
) -> None:
    """Reopening closes the first overlay and its subscription."""
    # Arrange
    field = _date_field(workspace)
    # Act
    field.activate()
    field.activate()
    # Assert
    first, second = FakeCalendar.created
    assert first.listener_count() == 0
    assert second.listener_count() == 1
    assert slot.container.children == [second]
    assert field.overlay_state == overlay.OverlayState.OPEN


def test_opening_another_field_closes_first(
    workspace: blocks.Workspace, slot: host.WidgetSlot
) -> None:
    """Only one overlay is open at a time."""
    # Arrange
    first_field = _date_field(workspace)
    second_field = _date_field(workspace, "2025-01-01")
    first_field.activate()
    # Act
    second_field.activate()
    # Assert
    first_picker, second_picker = FakeCalendar.created
    assert first_field.overlay_state == overlay.OverlayState.CLOSED
    assert first_field.subscription_token is None
    assert second_field.overlay_state == overlay.OverlayState.OPEN
    assert first_picker.listener_count() == 0
    assert second_picker.listener_count() == 1
    assert slot.is_owner(second_field)


def test_close_by_non_owner_is_noop(
    workspace: blocks.Workspace, slot: host.WidgetSlot
) -> None:
    """Closing or disposing a field that does not own the overlay changes nothing."""
    # Arrange
    owner = _date_field(workspace)
    bystander = _date_field(workspace)
    owner.activate()
    picker = FakeCalendar.created[-1]
    # Act
    workspace.overlay.close(bystander)
    bystander.dispose()
    # Assert
    assert slot.is_owner(owner)
    assert slot.container.children == [picker]
    assert owner.overlay_state == overlay.OverlayState.OPEN
    assert picker.listener_count() == 1


def test_close_when_closed_is_noop(workspace: blocks.Workspace) -> None:
    field = _date_field(workspace)
    workspace.overlay.close(field)
    workspace.overlay.close(field)
    assert field.overlay_state == overlay.OverlayState.CLOSED


def test_pick_sets_value_and_closes(
    workspace: blocks.Workspace,
    slot: host.WidgetSlot,
    fired_events: list[events.BlockChange],
) -> None:
    """The overlay is already closed when the change event fires."""
    # Arrange
    field = _date_field(workspace)
    fired_events.clear()
    states_seen = []
    events.add_listener(lambda event: states_seen.append(field.overlay_state))
    field.activate()
    picker = FakeCalendar.created[-1]
    # Act
    picker.pick(datetime.date(2024, 12, 25))
    # Assert
    assert field.get_value() == "2024-12-25"
    assert field.overlay_state == overlay.OverlayState.CLOSED
    assert states_seen == [overlay.OverlayState.CLOSED]
    assert len(fired_events) == 1
    assert slot.owner is None
    assert slot.container.children == []
    assert picker.listener_count() == 0


def test_cleared_pick_keeps_value(workspace: blocks.Workspace) -> None:
    """A cleared calendar closes the overlay without changing the value."""
    # Arrange
    field = _date_field(workspace)
    field.activate()
    # Act
    FakeCalendar.created[-1].pick(None)
    # Assert
    assert field.get_value() == "2024-03-01"
    assert field.overlay_state == overlay.OverlayState.CLOSED


def test_close_clears_event_group(workspace: blocks.Workspace) -> None:
    # Arrange
    field = _date_field(workspace)
    field.activate()
    events.set_group(True)
    assert events.get_group()
    # Act
    workspace.overlay.close(field)
    # Assert
    assert events.get_group() == ""
    assert field.subscription_token is None


def test_dispose_closes_owned_overlay(
    workspace: blocks.Workspace, slot: host.WidgetSlot
) -> None:
    """Destroying the block closes the overlay its field opened."""
    # Arrange
    block = workspace.new_block("date_value")
    field = block.get_field("DATE")
    field.activate()
    picker = FakeCalendar.created[-1]
    # Act
    block.dispose()
    # Assert
    assert slot.owner is None
    assert picker.listener_count() == 0
    assert field.overlay_state == overlay.OverlayState.CLOSED
    assert workspace.get_block(block.block_id) is None


def test_overlay_is_placed_below_field(
    workspace: blocks.Workspace, slot: host.WidgetSlot
) -> None:
    # Arrange
    block = workspace.new_block("date_value", x=4, y=2)
    # Act
    block.get_field("DATE").activate()
    # Assert
    assert slot.position == host.Placement(x=4, y=3, height=8)


def test_overlay_flips_above_near_bottom(
    workspace: blocks.Workspace, slot: host.WidgetSlot
) -> None:
    # Arrange
    block = workspace.new_block("date_value", x=4, y=20)
    # Act
    block.get_field("DATE").activate()
    # Assert
    assert slot.position == host.Placement(x=4, y=12, height=8)
