import pytest

from refwire.containers.array import ArrayContainer
from refwire.exceptions import RefwireNotFoundError


def test_has_is_true_only_for_mapped_identifiers() -> None:
    container = ArrayContainer({"aaa": 1, int: "bbb"})

    assert container.has("aaa")
    assert container.has(int)
    assert not container.has("bbb")


def test_get_returns_bindings_verbatim() -> None:
    def factory() -> int:
        return 42

    container = ArrayContainer({"alias": "target", "factory": factory, "none": None})

    assert container.get("alias") == "target"
    assert container.get("factory") is factory
    assert container.get("none") is None


def test_get_raises_not_found_for_missing_identifier() -> None:
    container = ArrayContainer()

    with pytest.raises(RefwireNotFoundError, match='"missing"'):
        container.get("missing")


def test_mapping_is_copied_at_construction() -> None:
    mapping = {"aaa": 1}
    container = ArrayContainer(mapping)

    mapping["bbb"] = 2
    del mapping["aaa"]

    assert container.has("aaa")
    assert not container.has("bbb")
