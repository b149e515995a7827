"""Unit tests for LocationAccessExtension."""

import pytest

from shared_kernel.addressing import UNASSIGNED_PARENT_ID, LocationAccessExtension


def _rehydrated(**overrides):
    state = dict(
        parent_id="C100",
        instructions="Ring twice",
        access_code="1234",
        window_start="09:00",
        window_end="12:00",
        contact_name="Sam",
        contact_phone="555-0199",
        is_active=True,
    )
    state.update(overrides)
    return LocationAccessExtension.rehydrate(**state)


class TestConstruction:
    """Tests for the new and rehydrate construction paths."""

    def test_new_extension_is_clean_and_active(self):
        access = LocationAccessExtension("C100")

        assert access.parent_id == "C100"
        assert access.instructions is None
        assert access.access_code is None
        assert access.is_active is True
        assert access.has_changes is False

    @pytest.mark.parametrize("parent_id", [None, "", "   "])
    def test_blank_parent_defaults_to_unassigned(self, parent_id):
        access = LocationAccessExtension(parent_id)

        assert access.parent_id == UNASSIGNED_PARENT_ID

    def test_rehydrate_applies_all_fields_and_is_clean(self):
        access = _rehydrated()

        assert access.instructions == "Ring twice"
        assert access.access_code == "1234"
        assert (access.window_start, access.window_end) == ("09:00", "12:00")
        assert (access.contact_name, access.contact_phone) == ("Sam", "555-0199")
        assert access.has_changes is False

    def test_rehydrate_inactive_is_clean(self):
        access = _rehydrated(is_active=False)

        assert access.is_active is False
        assert access.has_changes is False

    def test_build_candidate_is_dirty_when_populated(self):
        access = LocationAccessExtension.build(
            "C100", "Ring twice", None, None, None, None, None
        )

        assert access.has_changes is True


class TestUpdates:
    """Tests for no-op-unless-changed update methods."""

    def test_same_value_does_not_flag(self):
        access = _rehydrated()

        access.update_instructions("Ring twice")
        access.update_access_code("1234")
        access.update_window("09:00", "12:00")
        access.update_contact("Sam", "555-0199")

        assert access.has_changes is False

    def test_changed_value_flags(self):
        access = _rehydrated()

        access.update_access_code("9999")

        assert access.access_code == "9999"
        assert access.has_changes is True

    def test_window_pair_changes_when_either_part_differs(self):
        access = _rehydrated()

        access.update_window("09:00", "13:00")

        assert (access.window_start, access.window_end) == ("09:00", "13:00")
        assert access.has_changes is True

    def test_contact_pair_changes_when_either_part_differs(self):
        access = _rehydrated()

        access.update_contact("Alex", "555-0199")

        assert access.contact_name == "Alex"
        assert access.has_changes is True

    def test_clear_changes_resets_flag(self):
        access = _rehydrated()
        access.update_instructions("Use side door")

        access.clear_changes()

        assert access.has_changes is False


class TestLifecycle:
    """Tests for activate/deactivate."""

    def test_deactivate_flags_once(self):
        access = _rehydrated()

        access.deactivate()
        assert access.is_active is False
        assert access.has_changes is True

        access.clear_changes()
        access.deactivate()
        assert access.has_changes is False

    def test_activate_when_active_is_noop(self):
        access = _rehydrated()

        access.activate()

        assert access.has_changes is False

    def test_with_state_returns_self_clean(self):
        access = LocationAccessExtension("C100")

        result = access.with_state(
            "Leave with concierge", None, None, None, "Lee", None, is_active=False
        )

        assert result is access
        assert access.instructions == "Leave with concierge"
        assert access.is_active is False
        assert access.has_changes is False


class TestEquality:
    """Tests for structural equality."""

    def test_parent_id_compared_case_insensitively(self):
        assert _rehydrated(parent_id="c100") == _rehydrated(parent_id="C100")

    def test_dirty_flag_ignored(self):
        clean = _rehydrated()
        dirty = _rehydrated()
        dirty.update_instructions("changed")
        dirty.update_instructions("Ring twice")

        assert dirty.has_changes is True
        assert clean == dirty

    def test_active_state_participates(self):
        assert _rehydrated() != _rehydrated(is_active=False)

    def test_descriptive_field_participates(self):
        assert _rehydrated() != _rehydrated(access_code="0000")

    def test_is_unhashable(self):
        with pytest.raises(TypeError):
            hash(_rehydrated())
