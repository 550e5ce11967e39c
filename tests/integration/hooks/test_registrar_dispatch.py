"""Integration tests: registrations dispatched by a live host.

Every test registers through the HookRegistrar and fires hooks through
the HookTable, on the direct path and across a deferred-then-boot cycle.
"""

from hookkit.core.hooks import HookRegistrar
from hookkit.host import HookTable, HostRuntime
from hookkit.host.plugin import bootstrap


class FilterHandler:
    """Filter callback defined as a method."""

    def filter(self, value: str) -> str:
        return value + "_from_method"


class ActionHandler:
    """Action callback that records whether it ran."""

    def __init__(self) -> None:
        self.executed = False

    def action(self) -> None:
        self.executed = True


class TestFilters:
    """Filters registered while the host is live."""

    def test_add_filter(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that a filter registered on a live host transforms the value."""
        registrar.add_filter("test_filter", lambda value: value + "_filtered")

        assert host.apply_filters("test_filter", "original") == "original_filtered"

    def test_add_filter_with_priority(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that filters run lowest priority first."""
        registrar.add_filter("test_filter", lambda value: value + "_first", 5)
        registrar.add_filter("test_filter", lambda value: value + "_second", 15)

        assert host.apply_filters("test_filter", "orig") == "orig_first_second"

    def test_add_filter_with_multiple_args(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that accepted_args passes the extra arguments through."""
        registrar.add_filter(
            "test_filter",
            lambda value, arg1, arg2: f"{value}_{arg1}_{arg2}",
            10,
            3,
        )

        assert host.apply_filters("test_filter", "original", "foo", "bar") == "original_foo_bar"

    def test_add_filters(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that add_filters() registers one callback under every name."""

        def callback(value):
            return value + "_filtered"

        registrar.add_filters(["test_filter_1", "test_filter_2", "test_filter_3"], callback)

        assert host.apply_filters("test_filter_1", "value1") == "value1_filtered"
        assert host.apply_filters("test_filter_2", "value2") == "value2_filtered"
        assert host.apply_filters("test_filter_3", "value3") == "value3_filtered"
        for name in ("test_filter_1", "test_filter_2", "test_filter_3"):
            assert host.has_filter(name, callback) == 10

    def test_add_filter_once_runs_only_once(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that add_filter_once() filters only the first dispatch."""
        counter = 0

        def callback(value):
            nonlocal counter
            counter += 1
            return value + "_filtered"

        registrar.add_filter_once("test_filter", callback)

        assert host.apply_filters("test_filter", "first") == "first_filtered"
        assert host.apply_filters("test_filter", "second") == "second"
        assert host.apply_filters("test_filter", "third") == "third"
        assert counter == 1

    def test_side_effect_passes_value_through(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that a side-effect filter returns the value unchanged."""
        captured = []

        def callback(value):
            captured.append(value)
            return "this_should_be_ignored"

        registrar.add_filter_side_effect("test_filter", callback)

        assert host.apply_filters("test_filter", "original") == "original"
        assert captured == ["original"]

    def test_side_effect_does_not_disturb_later_filters(
        self, registrar: HookRegistrar, host: HookTable
    ) -> None:
        """Test that later filters see the value the side-effect filter received."""
        seen_by_later = []

        registrar.add_filter_side_effect("test_filter", lambda value: value.upper(), 5)
        registrar.add_filter("test_filter", lambda value: seen_by_later.append(value) or value, 15)

        host.apply_filters("test_filter", "original")

        assert seen_by_later == ["original"]

    def test_side_effect_with_multiple_args(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that a side-effect filter receives every accepted argument."""
        captured_args = []

        registrar.add_filter_side_effect(
            "test_filter",
            lambda value, arg1, arg2: captured_args.extend([value, arg1, arg2]),
            10,
            3,
        )

        assert host.apply_filters("test_filter", "original", "foo", "bar") == "original"
        assert captured_args == ["original", "foo", "bar"]

    def test_side_effect_once(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that add_filter_side_effect_once() calls the callback once."""
        counter = 0

        def callback(value):
            nonlocal counter
            counter += 1

        registrar.add_filter_side_effect_once("test_filter", callback)

        assert host.apply_filters("test_filter", "first") == "first"
        assert host.apply_filters("test_filter", "second") == "second"
        assert counter == 1

    def test_filter_once_with_priority(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that a once filter runs in priority order among regular filters."""
        results = []

        registrar.add_filter("test_filter", lambda value: results.append("always") or value, 5)
        registrar.add_filter_once("test_filter", lambda value: results.append("once") or value, 10)

        host.apply_filters("test_filter", "value")
        host.apply_filters("test_filter", "value")

        assert results == ["always", "once", "always"]

    def test_method_callback(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that a bound method filter can be found and removed again."""
        handler = FilterHandler()

        registrar.add_filter("test_filter", handler.filter)

        assert host.apply_filters("test_filter", "original") == "original_from_method"
        assert host.has_filter("test_filter", handler.filter) == 10

        host.remove_filter("test_filter", handler.filter)

        assert host.apply_filters("test_filter", "original") == "original"
        assert host.has_filter("test_filter", handler.filter) is False

    def test_filter_chaining(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that each filter receives the previous filter's result."""
        registrar.add_filter("test_filter", lambda v: v + 1)
        registrar.add_filter("test_filter", lambda v: v + 1)
        registrar.add_filter("test_filter", lambda v: v * 2)

        # (1 + 1 + 1) * 2
        assert host.apply_filters("test_filter", 1) == 6

    def test_add_filter_returns_true(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that add_filter() returns the host's True on the direct path."""
        assert registrar.add_filter("test_filter", lambda v: v) is True


class TestActions:
    """Actions registered while the host is live."""

    def test_add_action(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that an action registered on a live host runs on dispatch."""
        executed = []

        registrar.add_action("test_action", lambda: executed.append(True))
        host.do_action("test_action")

        assert executed == [True]

    def test_add_action_with_priority(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that actions run lowest priority first."""
        order = []

        registrar.add_action("test_action", lambda: order.append("second"), 15)
        registrar.add_action("test_action", lambda: order.append("first"), 5)
        host.do_action("test_action")

        assert order == ["first", "second"]

    def test_add_action_with_args(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that an action receives its accepted arguments."""
        captured_args = []

        registrar.add_action(
            "test_action", lambda arg1, arg2: captured_args.extend([arg1, arg2]), 10, 2
        )
        host.do_action("test_action", "foo", "bar")

        assert captured_args == ["foo", "bar"]

    def test_add_actions(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that add_actions() registers one callback under every name."""
        executed_hooks = []

        registrar.add_actions(
            ["test_action_1", "test_action_2", "test_action_3"],
            lambda: executed_hooks.append(host.current_action()),
        )
        host.do_action("test_action_1")
        host.do_action("test_action_2")
        host.do_action("test_action_3")

        assert executed_hooks == ["test_action_1", "test_action_2", "test_action_3"]

    def test_add_action_once_with_args(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that add_action_once() runs once with the first dispatch's arguments."""
        captured = []

        registrar.add_action_once(
            "test_action", lambda arg1, arg2: captured.append((arg1, arg2)), 10, 2
        )
        host.do_action("test_action", "foo", "bar")
        host.do_action("test_action", "baz", "qux")
        host.do_action("test_action", "baz", "qux")

        assert captured == [("foo", "bar")]
        assert host.has_action("test_action") is False

    def test_action_once_with_priority(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that a once action runs in priority order among regular actions."""
        results = []

        registrar.add_action("test_action", lambda: results.append("always"), 5)
        registrar.add_action_once("test_action", lambda: results.append("once"), 10)
        host.do_action("test_action")
        host.do_action("test_action")

        assert results == ["always", "once", "always"]

    def test_method_callback(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that a bound method action runs and is found at its priority."""
        handler = ActionHandler()

        registrar.add_action("test_action", handler.action, 20)
        host.do_action("test_action")

        assert handler.executed is True
        assert host.has_action("test_action", handler.action) == 20

    def test_remove_action(self, registrar: HookRegistrar, host: HookTable) -> None:
        """Test that a removed action no longer runs."""
        counter = []

        def callback():
            counter.append(1)

        registrar.add_action("test_action", callback)
        host.do_action("test_action")
        host.remove_action("test_action", callback)
        host.do_action("test_action")

        assert counter == [1]
        assert host.has_action("test_action", callback) is False


class TestDeferredThenBoot:
    """Registrations made before the host boots, fired after."""

    def test_deferred_hooks_run_after_boot(self, registrar: HookRegistrar, runtime: HostRuntime) -> None:
        """Test that hooks deferred before boot run in priority and registration order."""
        order = []
        registrar.add_filter("test_filter", lambda value: value + "_second", 15)
        registrar.add_filter("test_filter", lambda value: value + "_first", 5)
        registrar.add_action("test_action", lambda: order.append("a"))
        registrar.add_action("test_action", lambda: order.append("b"))

        host = bootstrap(runtime)
        host.do_action("test_action")

        assert host.apply_filters("test_filter", "orig") == "orig_first_second"
        assert order == ["a", "b"]

    def test_mixed_deferred_and_direct(self, registrar: HookRegistrar, runtime: HostRuntime) -> None:
        """Test that direct registrations after boot share the table with deferred ones."""
        registrar.add_filter("test_filter", lambda value: value + "_early", 20)
        host = bootstrap(runtime)
        registrar.add_filter("test_filter", lambda value: value + "_late", 1)

        assert registrar.is_host_loaded is True
        assert host.apply_filters("test_filter", "v") == "v_late_early"

    def test_deferred_once_and_side_effect(self, registrar: HookRegistrar, runtime: HostRuntime) -> None:
        """Test that deferred once wrappers remove themselves after boot."""
        seen = []
        registrar.add_filter_side_effect_once("test_filter", lambda value: seen.append(value))
        registrar.add_action_once("test_action", lambda: seen.append("action"))

        host = bootstrap(runtime)
        host.apply_filters("test_filter", "first")
        host.apply_filters("test_filter", "second")
        host.do_action("test_action")
        host.do_action("test_action")

        assert seen == ["first", "action"]
