"""Tests for the Hooks component."""

from __future__ import annotations

from themecore.domain.components import Hooks, SubscriptionKind
from themecore.infrastructure import InMemoryHost


def shout(title: str) -> str:
    return title.upper()


class TestHooks:
    """Tests for adding and removing configured hooks."""

    def test_applied_on_wp(self, host: InMemoryHost) -> None:
        """Hooks are applied when the wp event fires, not before."""
        component = Hooks({"add": [{"tag": "the_title", "callback": shout}]})

        subscriptions = component.init(host)

        assert [(s.kind, s.event) for s in subscriptions] == [(SubscriptionKind.ACTION, "wp")]
        assert not host.has_filter("the_title")

        host.do_action("wp")

        assert host.apply_filters("the_title", "hello") == "HELLO"

    def test_priority_and_args(self, host: InMemoryHost) -> None:
        """Entry priority and accepted args are passed to the host."""
        Hooks(
            {"add": [{"tag": "genesis_before", "callback": "genesis_do_nav", "priority": 5, "args": 0}]}
        ).init(host)
        host.do_action("wp")

        assert host.calls_to("add_filter")[-1].args == ("genesis_before", "genesis_do_nav", 5, 0)

    def test_remove_entries(self, host: InMemoryHost) -> None:
        """Remove entries unhook at the given priority."""
        host.add_action("genesis_after_header", "genesis_do_nav", 10)
        Hooks({"remove": [{"tag": "genesis_after_header", "callback": "genesis_do_nav"}]}).init(host)

        host.do_action("wp")

        assert not host.has_filter("genesis_after_header", "genesis_do_nav")

    def test_guard_false_skips_entry(self, host: InMemoryHost) -> None:
        """A false guard leaves the hook unapplied."""
        Hooks(
            {"add": [{"tag": "the_title", "callback": shout, "conditional": {"query": "is_home"}}]}
        ).init(host)

        host.do_action("wp")
        assert not host.has_filter("the_title")

    def test_guard_evaluated_at_wp(self, host: InMemoryHost) -> None:
        """Deferred guards see the request state at the time wp fires."""
        Hooks(
            {"add": [{"tag": "the_title", "callback": shout, "conditional": {"query": "is_home"}}]}
        ).init(host)

        host.conditions["is_home"] = True
        host.do_action("wp")

        assert host.has_filter("the_title", shout)

    def test_callable_guard(self, host: InMemoryHost) -> None:
        """Python callables returning False skip the entry, True applies it."""
        Hooks(
            {
                "add": [
                    {"tag": "the_title", "callback": shout, "conditional": lambda: False},
                    {"tag": "the_content", "callback": shout, "conditional": lambda: True},
                ]
            }
        ).init(host)

        host.do_action("wp")

        assert not host.has_filter("the_title")
        assert host.has_filter("the_content", shout)

    def test_null_guard_applies_entry(self, host: InMemoryHost) -> None:
        """A null conditional counts as no guard."""
        Hooks({"add": [{"tag": "the_title", "callback": shout, "conditional": None}]}).init(host)

        host.do_action("wp")

        assert host.has_filter("the_title", shout)

    def test_non_boolean_literal_guard_skips(self, host: InMemoryHost) -> None:
        """A literal guard that is not a boolean is not a predicate."""
        Hooks({"add": [{"tag": "the_title", "callback": shout, "conditional": "yes"}]}).init(host)

        host.do_action("wp")

        assert not host.has_filter("the_title")

    def test_empty_config(self, host: InMemoryHost) -> None:
        """Without add or remove nothing is subscribed."""
        assert Hooks({}).init(host) == ()
