"""显示开关测试。"""

from reveal_gate import SecretRevealGate


class TestSecretRevealGate:
    """默认隐藏与翻转。"""

    def test_defaults_hidden(self):
        gate = SecretRevealGate()
        assert gate.mnemonic_visible is False
        assert gate.is_private_key_visible("anything") is False
        assert gate.private_key_flags() == {}

    def test_toggle_twice_returns_hidden(self):
        gate = SecretRevealGate()
        assert gate.toggle_private_key("w1") is True
        assert gate.toggle_private_key("w1") is False
        assert gate.is_private_key_visible("w1") is False

    def test_toggles_are_independent(self):
        gate = SecretRevealGate()
        gate.toggle_private_key("w1")
        assert gate.is_private_key_visible("w2") is False
        assert gate.mnemonic_visible is False
        gate.toggle_mnemonic()
        assert gate.private_key_flags() == {"w1": True}

    def test_forget(self):
        gate = SecretRevealGate()
        gate.toggle_private_key("w1")
        gate.forget("w1")
        gate.forget("missing")
        assert gate.private_key_flags() == {}
        assert gate.is_private_key_visible("w1") is False

    def test_reset(self):
        gate = SecretRevealGate()
        gate.toggle_mnemonic()
        gate.toggle_private_key("w1")
        gate.reset()
        assert gate.mnemonic_visible is False
        assert gate.private_key_flags() == {}

    def test_flags_are_a_copy(self):
        gate = SecretRevealGate()
        gate.private_key_flags()["w1"] = True
        assert gate.is_private_key_visible("w1") is False
