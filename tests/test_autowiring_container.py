from collections.abc import Callable
from typing import Any

import pytest

from refwire.autowirer import Autowirer
from refwire.container_interface import IContainer
from refwire.containers.autowiring import AutowiringContainer
from refwire.exceptions import (
    RefwireContainerError,
    RefwireInvalidConfigurationError,
    RefwireNotFoundError,
)
from refwire.param_resolvers import UntypedContainerParamResolver
from tests.fixtures.classes import (
    Dependant,
    DependantFactory,
    DependantInterface,
    Exploding,
    Greeter,
    Invokable,
    InvokableFactory,
    InvokableInterface,
    Linker,
    LinkerInterface,
    Session,
    SessionFactory,
    SessionInterface,
    SettingsProvider,
    SettingsProviderInterface,
    Terminus,
    TerminusInterface,
)

MakeContainer = Callable[..., AutowiringContainer]


class TestAutowiring:
    def test_autowire_fails(self, make_container: MakeContainer) -> None:
        container = make_container()

        assert not container.has(SettingsProviderInterface)

        with pytest.raises(RefwireNotFoundError):
            container.get(SettingsProviderInterface)

    def test_autowire_simple(self, make_container: MakeContainer) -> None:
        container = make_container({SettingsProviderInterface: SettingsProvider})

        assert container.has(SettingsProviderInterface)

        settings_provider = container.get(SettingsProviderInterface)

        assert isinstance(settings_provider, SettingsProviderInterface)
        assert isinstance(settings_provider, SettingsProvider)

    def test_autowire_dependency(self, make_container: MakeContainer) -> None:
        container = make_container(
            {
                LinkerInterface: Linker,
                SettingsProviderInterface: SettingsProvider,
            },
        )

        assert container.has(LinkerInterface)

        linker = container.get(LinkerInterface)

        assert isinstance(linker, Linker)
        assert linker.settings_provider is container.get(SettingsProviderInterface)
        assert linker.abs_url("about") == "https://localhost/about"

    def test_autowire_factory(self, make_container: MakeContainer) -> None:
        container = make_container(
            {
                SettingsProviderInterface: SettingsProvider,
                SessionInterface: SessionFactory,
            },
        )

        assert container.has(SessionInterface)

        session = container.get(SessionInterface)

        assert isinstance(session, Session)

    def test_autowire_callable_factory(self, make_container: MakeContainer) -> None:
        def make_session(container: IContainer) -> SessionInterface:
            return Session(container.get(SettingsProviderInterface))

        container = make_container(
            {
                SettingsProviderInterface: SettingsProvider,
                SessionInterface: make_session,
            },
        )

        session = container.get(SessionInterface)

        assert isinstance(session, Session)
        assert session.settings_provider() is container.get(SettingsProviderInterface)

    def test_untyped_container_resolution(
        self,
        autowirer: Autowirer,
        make_container: MakeContainer,
    ) -> None:
        # add a resolver for an untyped `container` param
        autowirer.with_untyped_param_resolver(UntypedContainerParamResolver())

        outer_container = make_container(
            {
                "aaa": SettingsProvider,
                "ccc": lambda container: container.get("aaa"),
            },
        )

        ccc = outer_container.get("ccc")

        assert isinstance(ccc, SettingsProvider)
        assert ccc is outer_container.get("aaa")

    def test_alias_and_redirect(self, make_container: MakeContainer) -> None:
        bbb = object()

        def redirect(c: IContainer) -> Any:
            return c.get("bbb")

        container = make_container({"aaa": "bbb", "bbb": bbb, "ccc": redirect})

        assert container.get("ccc") is bbb
        assert container.get("bbb") is bbb
        assert container.get("aaa") is bbb

    def test_dependant_scenario(self, make_container: MakeContainer) -> None:
        container = make_container(
            {
                TerminusInterface: Terminus,
                DependantInterface: DependantFactory,
            },
        )

        dependant = container.get(DependantInterface)

        assert isinstance(dependant, Dependant)
        assert isinstance(dependant.dependency(), Terminus)


class TestResolutionStates:
    def test_bootstrap_entries(self, autowirer: Autowirer, make_container: MakeContainer) -> None:
        container = make_container()

        assert container.has(IContainer)
        assert container.get(IContainer) is container
        assert container.get(Autowirer) is autowirer
        assert container.autowirer is autowirer

    def test_plain_objects_are_returned_verbatim(self, make_container: MakeContainer) -> None:
        settings = {"debug": True}
        container = make_container({"settings": settings, "answer": 42, "nothing": None})

        assert container.get("settings") is settings
        assert container.get("answer") == 42
        assert container.get("nothing") is None

    def test_get_is_idempotent(self, make_container: MakeContainer) -> None:
        container = make_container({SettingsProviderInterface: SettingsProvider})

        assert container.get(SettingsProviderInterface) is container.get(SettingsProviderInterface)
        assert container.get(Linker) is container.get(Linker)

    def test_alias_chain_shares_one_instance(self, make_container: MakeContainer) -> None:
        container = make_container({"a": "b", "b": "c", "c": SettingsProvider})

        a = container.get("a")

        assert isinstance(a, SettingsProvider)
        assert a is container.get("b") is container.get("c")

    def test_class_binding_shares_the_bound_class_instance(
        self,
        make_container: MakeContainer,
    ) -> None:
        container = make_container({SettingsProviderInterface: SettingsProvider})

        settings_provider = container.get(SettingsProviderInterface)

        assert settings_provider is container.get(SettingsProvider)
        assert container.is_resolved(SettingsProvider)

    def test_string_key_aliases_an_interface(self, make_container: MakeContainer) -> None:
        container = make_container(
            {
                SettingsProviderInterface: SettingsProvider,
                "settings": SettingsProviderInterface,
            },
        )

        settings = container.get("settings")

        assert isinstance(settings, SettingsProvider)
        assert settings is container.get(SettingsProviderInterface)
        assert settings is container.get(SettingsProvider)

    def test_bound_factory_class_is_shared_and_invoked(
        self,
        make_container: MakeContainer,
    ) -> None:
        container = make_container(
            {
                SettingsProviderInterface: SettingsProvider,
                SessionInterface: SessionFactory,
            },
        )

        session = container.get(SessionInterface)

        assert isinstance(session, Session)
        assert isinstance(container.get(SessionFactory), SessionFactory)
        assert container.get(SessionInterface) is session

    def test_has_does_not_import_bare_names(
        self,
        make_container: MakeContainer,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        container = make_container()

        assert not container.has("this")
        assert capsys.readouterr().out == ""

    def test_alias_to_import_path(self, make_container: MakeContainer) -> None:
        container = make_container({"settings": "tests.fixtures.classes.SettingsProvider"})

        assert isinstance(container.get("settings"), SettingsProvider)

    def test_undefined_class_is_autowired(self, make_container: MakeContainer) -> None:
        container = make_container({SettingsProviderInterface: SettingsProvider})

        assert container.has(Linker)
        assert isinstance(container.get(Linker), Linker)

    def test_unbound_identifier_is_not_found(self, make_container: MakeContainer) -> None:
        container = make_container()

        assert not container.has("nowhere")
        with pytest.raises(RefwireNotFoundError) as exc_info:
            container.get("nowhere")

        assert isinstance(exc_info.value.__cause__, RefwireInvalidConfigurationError)

    def test_has_does_not_populate_the_cache(self, make_container: MakeContainer) -> None:
        container = make_container({SettingsProviderInterface: SettingsProvider})

        assert container.has(Linker)
        assert not container.is_resolved(Linker)
        assert not container.is_resolved(SettingsProviderInterface)

    def test_sub_container_bindings_are_resolved(self, make_container: MakeContainer) -> None:
        container = make_container({"own": "shared"})
        container.with_container({"shared": SettingsProvider, "own": "ignored"})

        assert isinstance(container.get("own"), SettingsProvider)
        assert container.get("own") is container.get("shared")

    def test_first_resolution_is_kept(self, make_container: MakeContainer) -> None:
        container = make_container({SettingsProviderInterface: SettingsProvider})
        first = container.get(SettingsProviderInterface)

        container.with_container({"settings": object()})

        assert container.get(SettingsProviderInterface) is first


class TestCallableChains:
    def test_chain_is_invoked_until_the_type_is_reached(
        self,
        make_container: MakeContainer,
    ) -> None:
        calls: list[str] = []

        def make_session_factory() -> Callable[..., SessionInterface]:
            calls.append("outer")

            def make_session(settings_provider: SettingsProviderInterface) -> SessionInterface:
                calls.append("inner")
                return Session(settings_provider)

            return make_session

        container = make_container(
            {
                SettingsProviderInterface: SettingsProvider,
                SessionInterface: make_session_factory,
            },
        )

        assert isinstance(container.get(SessionInterface), Session)
        assert calls == ["outer", "inner"]

    def test_opaque_key_invokes_callable_exactly_once(self, make_container: MakeContainer) -> None:
        calls: list[str] = []

        def inner() -> str:
            calls.append("inner")
            return "never"

        def outer() -> Callable[[], str]:
            calls.append("outer")
            return inner

        container = make_container({"factory": outer})

        assert container.get("factory") is inner
        assert calls == ["outer"]

    def test_invokable_instance_of_the_type_is_not_invoked(
        self,
        make_container: MakeContainer,
    ) -> None:
        # invoking the product would need a TerminusInterface binding
        container = make_container({InvokableInterface: InvokableFactory})

        invokable = container.get(InvokableInterface)

        assert isinstance(invokable, Invokable)

    def test_chain_ending_with_wrong_type_is_an_error(self, make_container: MakeContainer) -> None:
        container = make_container({SessionInterface: lambda: 42})

        with pytest.raises(RefwireContainerError, match='ended up with "int"'):
            container.get(SessionInterface)

    def test_errors_inside_the_chain_are_wrapped(self, make_container: MakeContainer) -> None:
        def broken() -> SessionInterface:
            msg = "no session today"
            raise RuntimeError(msg)

        container = make_container({SessionInterface: broken, "opaque": broken})

        with pytest.raises(RefwireContainerError) as exc_info:
            container.get(SessionInterface)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

        with pytest.raises(RefwireContainerError) as exc_info:
            container.get("opaque")
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_unresolvable_factory_parameter_is_wrapped(self, make_container: MakeContainer) -> None:
        container = make_container({"session": lambda settings_provider: settings_provider})

        with pytest.raises(RefwireContainerError) as exc_info:
            container.get("session")

        assert isinstance(exc_info.value.__cause__, RefwireInvalidConfigurationError)

    def test_unchecked_protocol_is_treated_as_opaque(self, make_container: MakeContainer) -> None:
        class English:
            def greet(self) -> str:
                return "hello"

        container = make_container({Greeter: English})

        assert container.get(Greeter).greet() == "hello"


class TestFailures:
    def test_constructor_errors_are_wrapped(self, make_container: MakeContainer) -> None:
        container = make_container()

        assert container.has(Exploding)
        with pytest.raises(RefwireContainerError) as exc_info:
            container.get(Exploding)

        assert not isinstance(exc_info.value, RefwireNotFoundError)
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert not container.is_resolved(Exploding)

    def test_alias_cycles_are_not_detected(self, make_container: MakeContainer) -> None:
        container = make_container({"ping": "pong", "pong": "ping"})

        with pytest.raises(RecursionError):
            container.get("ping")
