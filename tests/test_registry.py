#!/usr/bin/env python3
"""
Tests for the CVar registry.
"""

import threading

import pytest

from cvar_console.core import (
    CVarDef,
    CVarFlags,
    CVarRegistry,
    DuplicateRegistrationError,
    NotRegisteredError,
    TypeMismatchError,
    UnsupportedTypeError,
    ValueType,
)
from cvar_console.cvars import CVars


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def registry():
    """Create a registry with one CVar of each type."""
    reg = CVarRegistry()
    reg.register("fps_max", ValueType.INTEGER32, 60)
    reg.register("display.vsync", ValueType.BOOLEAN, True)
    reg.register("ui.scale", ValueType.FLOAT32, 1.5)
    reg.register("player.name", ValueType.STRING, "Player")
    reg.register("net.password", ValueType.STRING, "", CVarFlags.CONFIDENTIAL)
    return reg


# ============================================================================
# Registration Tests
# ============================================================================

class TestRegister:
    """Tests for CVarRegistry.register()."""

    def test_register_sets_current_to_default(self):
        """Test a new CVar starts at its default value."""
        reg = CVarRegistry()
        entry = reg.register("fps_max", ValueType.INTEGER32, 60)
        assert entry.value == 60
        assert entry.default_value == 60
        assert reg.get_value("fps_max") == 60

    def test_register_default_flags(self):
        """Test flags default to NONE."""
        reg = CVarRegistry()
        reg.register("fps_max", ValueType.INTEGER32, 60)
        assert reg.get_flags("fps_max") == CVarFlags.NONE

    def test_register_duplicate_same_type(self, registry):
        """Test registering the same name twice fails."""
        with pytest.raises(DuplicateRegistrationError) as exc_info:
            registry.register("fps_max", ValueType.INTEGER32, 60)
        assert exc_info.value.name == "fps_max"

    def test_register_duplicate_other_type_keeps_original(self, registry):
        """Test a duplicate with a different type never replaces the entry."""
        with pytest.raises(DuplicateRegistrationError):
            registry.register("fps_max", ValueType.STRING, "sixty")
        assert registry.get_type("fps_max") is ValueType.INTEGER32
        assert registry.get_value("fps_max") == 60

    def test_register_duplicate_bad_default(self, registry):
        """Test a duplicate is reported even when its default is invalid."""
        with pytest.raises(DuplicateRegistrationError):
            registry.register("fps_max", ValueType.BOOLEAN, "not a bool")

    def test_register_default_type_mismatch(self):
        """Test a default of the wrong type is rejected."""
        reg = CVarRegistry()
        with pytest.raises(TypeMismatchError):
            reg.register("fps_max", ValueType.INTEGER32, "60")
        assert not reg.is_registered("fps_max")

    def test_register_bool_is_not_integer(self):
        """Test bool defaults are not accepted for Integer32."""
        reg = CVarRegistry()
        with pytest.raises(TypeMismatchError):
            reg.register("fps_max", ValueType.INTEGER32, True)

    def test_register_int_is_not_float(self):
        """Test int defaults are not accepted for Float32."""
        reg = CVarRegistry()
        with pytest.raises(TypeMismatchError):
            reg.register("ui.scale", ValueType.FLOAT32, 1)

    def test_register_unknown_type(self):
        """Test an unknown value type is rejected."""
        reg = CVarRegistry()
        with pytest.raises(UnsupportedTypeError):
            reg.register("pos", "Vector2", (0, 0))

    def test_register_type_by_display_name(self):
        """Test the type may be given by its display name."""
        reg = CVarRegistry()
        reg.register("fps_max", "Integer32", 60)
        assert reg.get_type("fps_max") is ValueType.INTEGER32

    def test_names_are_case_sensitive(self, registry):
        """Test names differing only in case are distinct."""
        registry.register("FPS_MAX", ValueType.INTEGER32, 30)
        assert registry.get_value("FPS_MAX") == 30
        assert registry.get_value("fps_max") == 60


# ============================================================================
# Lookup Tests
# ============================================================================

class TestLookup:
    """Tests for registry lookups."""

    def test_is_registered(self, registry):
        assert registry.is_registered("fps_max")
        assert not registry.is_registered("doesnotexist")
        assert not registry.is_registered("fps")

    def test_contains(self, registry):
        assert "fps_max" in registry
        assert "doesnotexist" not in registry

    def test_get_type(self, registry):
        assert registry.get_type("fps_max") is ValueType.INTEGER32
        assert registry.get_type("display.vsync") is ValueType.BOOLEAN
        assert registry.get_type("ui.scale") is ValueType.FLOAT32
        assert registry.get_type("player.name") is ValueType.STRING

    def test_get_flags(self, registry):
        assert registry.get_flags("net.password") & CVarFlags.CONFIDENTIAL

    @pytest.mark.parametrize("method", ["get_type", "get_flags", "get_value", "get_default"])
    def test_missing_name(self, registry, method):
        """Test lookups of unknown names raise NotRegisteredError."""
        with pytest.raises(NotRegisteredError) as exc_info:
            getattr(registry, method)("doesnotexist")
        assert exc_info.value.name == "doesnotexist"

    def test_get_value_as_matching_type(self, registry):
        assert registry.get_value_as("fps_max", ValueType.INTEGER32) == 60

    def test_get_value_as_wrong_type(self, registry):
        """Test the typed accessor rejects a wrong expectation."""
        with pytest.raises(TypeMismatchError):
            registry.get_value_as("fps_max", ValueType.STRING)

    def test_list_names_sorted(self, registry):
        names = registry.list_names()
        assert names == sorted(names)
        assert names == [
            "display.vsync",
            "fps_max",
            "net.password",
            "player.name",
            "ui.scale",
        ]

    def test_list_names_stable(self, registry):
        assert registry.list_names() == registry.list_names()

    def test_iter_in_name_order(self, registry):
        assert [e.name for e in registry] == registry.list_names()

    def test_len(self, registry):
        assert len(registry) == 5


# ============================================================================
# Mutation Tests
# ============================================================================

class TestSetValue:
    """Tests for CVarRegistry.set_value()."""

    def test_set_value(self, registry):
        registry.set_value("fps_max", 144)
        assert registry.get_value("fps_max") == 144

    def test_set_value_missing_name(self, registry):
        with pytest.raises(NotRegisteredError):
            registry.set_value("doesnotexist", 1)

    @pytest.mark.parametrize("name,bad_value", [
        ("fps_max", "144"),
        ("fps_max", 1.5),
        ("fps_max", False),
        ("fps_max", 2**31),
        ("display.vsync", 1),
        ("ui.scale", "1.5"),
        ("ui.scale", 2),
        ("player.name", 5),
    ])
    def test_type_mismatch_leaves_value(self, registry, name, bad_value):
        """Test a rejected write never changes the stored value."""
        before = registry.get_value(name)
        with pytest.raises(TypeMismatchError):
            registry.set_value(name, bad_value)
        assert registry.get_value(name) == before

    def test_float_stored_as_single_precision(self, registry):
        registry.set_value("ui.scale", 0.1)
        assert registry.get_value("ui.scale") == pytest.approx(0.1)
        assert registry.get_value("ui.scale") != 0.1

    def test_reset_value(self, registry):
        registry.set_value("fps_max", 144)
        registry.reset_value("fps_max")
        assert registry.get_value("fps_max") == 60

    def test_default_survives_set(self, registry):
        registry.set_value("fps_max", 144)
        assert registry.get_default("fps_max") == 60

    def test_concurrent_reads_see_whole_values(self, registry):
        """Test readers always see a value of the registered type."""
        errors = []
        stop = threading.Event()

        def writer():
            for i in range(2000):
                registry.set_value("player.name", f"name-{i}")
            stop.set()

        def reader():
            while not stop.is_set():
                value = registry.get_value("player.name")
                if not isinstance(value, str):
                    errors.append(value)

        threads = [threading.Thread(target=reader) for _ in range(3)]
        threads.append(threading.Thread(target=writer))
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert registry.get_value("player.name") == "name-1999"


# ============================================================================
# Definition Tests
# ============================================================================

class TestCVarDef:
    """Tests for declarative CVar definitions."""

    def test_register_def(self):
        reg = CVarRegistry()
        defn = CVarDef("fps_max", ValueType.INTEGER32, 60, description="Frame cap")
        reg.register_def(defn)
        assert reg.get(defn) == 60
        assert reg.get_description("fps_max") == "Frame cap"

    def test_set_through_def(self):
        reg = CVarRegistry()
        defn = CVarDef("fps_max", ValueType.INTEGER32, 60)
        reg.register_def(defn)
        reg.set(defn, 30)
        assert reg.get(defn) == 30

    def test_register_defs_from_class(self):
        """Test every CVarDef attribute of a holder is registered."""
        reg = CVarRegistry()
        entries = reg.register_defs(CVars)
        names = [e.name for e in entries]
        assert names == sorted(names)
        assert "fps_max" in reg
        assert "net.password" in reg
        assert reg.get_flags("net.password") & CVarFlags.CONFIDENTIAL

    def test_register_defs_twice_fails(self):
        reg = CVarRegistry()
        reg.register_defs(CVars)
        with pytest.raises(DuplicateRegistrationError):
            reg.register_defs(CVars)
