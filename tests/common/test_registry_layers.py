from __future__ import annotations

import pytest

from common.base_registry import BaseRegistry


def test_register_and_get_with_normalization() -> None:
    reg = BaseRegistry()

    @reg.register(None)
    def NoiseWash():  # noqa: N802 (テスト用)
        return None

    assert reg.is_registered("noise_wash")
    assert reg.get("NoiseWash") is NoiseWash
    assert reg.get("noise-wash") is NoiseWash


def test_duplicate_registration_raises_and_same_object_is_ok() -> None:
    reg = BaseRegistry()

    @reg.register("sample")
    def sample():  # noqa: ANN001 - テスト用
        return 1

    # 同一オブジェクトの再登録は許容
    reg.register("sample")(sample)
    with pytest.raises(ValueError):
        reg.register("sample")(lambda: 2)


def test_get_unknown_raises_key_error() -> None:
    reg = BaseRegistry()
    with pytest.raises(KeyError):
        reg.get("missing")


def test_list_all_keeps_registration_order_and_unregister() -> None:
    reg = BaseRegistry()
    for name in ("b_layer", "a_layer", "c_layer"):
        reg.register(name)(object())
    assert reg.list_all() == ["b_layer", "a_layer", "c_layer"]

    reg.unregister("a-layer")
    reg.unregister("nonexistent")  # 例外にならない
    assert reg.list_all() == ["b_layer", "c_layer"]


def test_registry_property_is_a_copy() -> None:
    reg = BaseRegistry()
    reg.register("x")(1)
    snapshot = reg.registry
    snapshot["y"] = 2
    assert not reg.is_registered("y")


@pytest.mark.parametrize("bad", ["", 3])
def test_normalize_key_rejects_empty_and_non_str(bad) -> None:
    with pytest.raises((ValueError, TypeError)):
        BaseRegistry.normalize_key(bad)
