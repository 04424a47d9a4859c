"""
Tests for the JB Bypass panel.
"""
from ui.tabs.jb_bypass_tab import JBBypassTab


def test_checkbox_mirrors_store(qtbot, settings_store):
    settings_store.update('bypass', True)
    tab = JBBypassTab(settings_store)
    qtbot.addWidget(tab)

    assert tab.bypass_check.isChecked() is True
    assert tab.bypass_check.text() == "Enable jailbreak bypass"


def test_toggle_writes_through(qtbot, settings_store):
    tab = JBBypassTab(settings_store)
    qtbot.addWidget(tab)

    tab.bypass_check.setChecked(True)

    assert settings_store.settings.bypass is True


def test_reset_unchecks(qtbot, settings_store):
    tab = JBBypassTab(settings_store)
    qtbot.addWidget(tab)
    tab.bypass_check.setChecked(True)

    settings_store.reset()

    assert tab.bypass_check.isChecked() is False
