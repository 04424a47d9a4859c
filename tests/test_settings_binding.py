"""Tests for declarative settings binding utility.

Tests cover:
- SliderBinding load/save with scaling and labels
- CheckBinding load/save
- ComboDataBinding load/save with default fallback
- ButtonGroupBinding load/save
- apply_bindings_load / collect_bindings_save batch operations
- Error resilience (missing widgets, bad values)
"""
from ui.tabs.settings_binding import (
    SliderBinding,
    CheckBinding,
    ComboDataBinding,
    ButtonGroupBinding,
    apply_bindings_load,
    collect_bindings_save,
)


class _FakeSlider:
    """Minimal QSlider/QSpinBox mock."""
    def __init__(self, value=0):
        self._value = value
    def value(self):
        return self._value
    def setValue(self, v):
        self._value = v


class _FakeCheckBox:
    """Minimal QCheckBox mock."""
    def __init__(self, checked=False):
        self._checked = checked
    def isChecked(self):
        return self._checked
    def setChecked(self, v):
        self._checked = v


class _FakeComboBox:
    """Minimal QComboBox mock."""
    def __init__(self, items=None):
        self._items = items or []  # list of (data, text)
        self._index = 0
    def findData(self, data):
        for i, (d, _) in enumerate(self._items):
            if d == data:
                return i
        return -1
    def currentData(self):
        if 0 <= self._index < len(self._items):
            return self._items[self._index][0]
        return None
    def setCurrentIndex(self, i):
        self._index = i


class _FakeButton:
    def __init__(self):
        self.checked = False
    def setChecked(self, v):
        self.checked = v


class _FakeButtonGroup:
    """Minimal exclusive QButtonGroup mock."""
    def __init__(self, ids):
        self._buttons = {i: _FakeButton() for i in ids}
    def button(self, button_id):
        return self._buttons.get(button_id)
    def checkedId(self):
        for i, b in self._buttons.items():
            if b.checked:
                return i
        return -1


class _FakeLabel:
    def __init__(self):
        self.text = ""
    def setText(self, t):
        self.text = t


class _Tab:
    """Bare attribute holder standing in for a panel."""


class TestSliderBinding:

    def test_load_and_label(self):
        tab = _Tab()
        tab.sensitivity_slider = _FakeSlider()
        tab.sensitivity_slider_label = _FakeLabel()
        binding = SliderBinding('sensitivity', widget_attr='sensitivity_slider',
                                label_fmt='Mouse sensitivity: {:.0f}')

        binding.load(tab, {'sensitivity': 42.0})

        assert tab.sensitivity_slider.value() == 42
        assert tab.sensitivity_slider_label.text == 'Mouse sensitivity: 42'

    def test_scale(self):
        tab = _Tab()
        tab.opacity = _FakeSlider()
        binding = SliderBinding('opacity', scale=100.0)

        binding.load(tab, {'opacity': 0.25})

        assert tab.opacity.value() == 25
        assert binding.save(tab) == ('opacity', 0.25)

    def test_bad_value_uses_default(self):
        tab = _Tab()
        tab.sensitivity = _FakeSlider(7)
        binding = SliderBinding('sensitivity', default=50.0)

        binding.load(tab, {'sensitivity': 'abc'})

        assert tab.sensitivity.value() == 50

    def test_missing_widget(self):
        binding = SliderBinding('sensitivity')

        binding.load(_Tab(), {'sensitivity': 10})

        assert binding.save(_Tab()) is None


class TestCheckBinding:

    def test_load_save(self):
        tab = _Tab()
        tab.bypass_check = _FakeCheckBox()
        binding = CheckBinding('bypass', widget_attr='bypass_check')

        binding.load(tab, {'bypass': True})

        assert tab.bypass_check.isChecked() is True
        assert binding.save(tab) == ('bypass', True)

    def test_missing_key_uses_default(self):
        tab = _Tab()
        tab.keymapping = _FakeCheckBox()

        CheckBinding('keymapping', default=True).load(tab, {})

        assert tab.keymapping.isChecked() is True


class TestComboDataBinding:

    def _tab(self):
        tab = _Tab()
        tab.device_combo = _FakeComboBox([("iPad6,7", "Gen 1"), ("iPad8,6", "Gen 3"), ("iPad13,8", "Gen 5")])
        return tab

    def test_load_save(self):
        tab = self._tab()
        binding = ComboDataBinding('ios_device_model', widget_attr='device_combo')

        binding.load(tab, {'ios_device_model': 'iPad13,8'})

        assert binding.save(tab) == ('ios_device_model', 'iPad13,8')

    def test_unknown_value_falls_back_to_default(self):
        tab = self._tab()
        binding = ComboDataBinding('ios_device_model', default='iPad8,6', widget_attr='device_combo')

        binding.load(tab, {'ios_device_model': 'iPhone1,1'})

        assert tab.device_combo.currentData() == 'iPad8,6'


class TestButtonGroupBinding:

    def test_load_save(self):
        tab = _Tab()
        tab.refresh_rate_group = _FakeButtonGroup([60, 120])
        binding = ButtonGroupBinding('refresh_rate', default=60, widget_attr='refresh_rate_group')

        binding.load(tab, {'refresh_rate': 120})

        assert tab.refresh_rate_group.button(120).checked is True
        assert binding.save(tab) == ('refresh_rate', 120)

    def test_unknown_id_falls_back_to_default(self):
        tab = _Tab()
        tab.refresh_rate_group = _FakeButtonGroup([60, 120])
        binding = ButtonGroupBinding('refresh_rate', default=60, widget_attr='refresh_rate_group')

        binding.load(tab, {'refresh_rate': 144})

        assert binding.save(tab) == ('refresh_rate', 60)

    def test_nothing_checked_saves_default(self):
        tab = _Tab()
        tab.refresh_rate_group = _FakeButtonGroup([60, 120])
        binding = ButtonGroupBinding('refresh_rate', default=60, widget_attr='refresh_rate_group')

        assert binding.save(tab) == ('refresh_rate', 60)


class TestBatch:

    def test_apply_and_collect(self):
        tab = _Tab()
        tab.keymapping_check = _FakeCheckBox()
        tab.sensitivity_slider = _FakeSlider()
        bindings = [
            CheckBinding('keymapping', widget_attr='keymapping_check'),
            SliderBinding('sensitivity', widget_attr='sensitivity_slider'),
            CheckBinding('mouse_mapping', widget_attr='not_there'),
        ]

        apply_bindings_load(tab, {'keymapping': True, 'sensitivity': 80}, bindings)

        assert collect_bindings_save(tab, bindings) == {'keymapping': True, 'sensitivity': 80.0}

    def test_bad_value_does_not_abort_batch(self):
        tab = _Tab()
        tab.refresh_rate_group = _FakeButtonGroup([60, 120])
        tab.bypass = _FakeCheckBox()
        bindings = [
            ButtonGroupBinding('refresh_rate', widget_attr='refresh_rate_group'),
            CheckBinding('bypass'),
        ]

        apply_bindings_load(tab, {'refresh_rate': 'fast', 'bypass': True}, bindings)

        assert tab.bypass.isChecked() is True
