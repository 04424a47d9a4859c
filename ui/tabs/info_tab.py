"""
Info panel: read-only bundle metadata of the app.
"""
from typing import List, Optional, Tuple
from PySide6.QtWidgets import QWidget, QVBoxLayout, QTableWidget, QTableWidgetItem, QHeaderView, QAbstractItemView
from PySide6.QtCore import Qt

from core.app_info import AppInfo
from core.i18n import tr


def info_rows(info: AppInfo) -> List[Tuple[str, str]]:
    """Label/value pairs in display order."""
    return [
        (tr("settings.info.displayName"), info.display_name),
        (tr("settings.info.bundleName"), info.bundle_name),
        (tr("settings.info.bundleIdentifier"), info.bundle_identifier),
        (tr("settings.info.bundleVersion"), info.bundle_version),
        (tr("settings.info.executableName"), info.executable_name),
        (tr("settings.info.minimumOSVersion"), info.minimum_os_version),
        (tr("settings.info.url"), info.url),
        (tr("settings.info.isGame"), tr("settings.info.yes") if info.is_game else tr("settings.info.no")),
    ]


class InfoTab(QWidget):
    """Two-column table of Info.plist values with alternating rows."""

    def __init__(self, info: AppInfo, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._info = info

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        rows = info_rows(info)
        self.table = QTableWidget(len(rows), 2, self)
        self.table.setAlternatingRowColors(True)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.table.horizontalHeader().setVisible(False)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)

        for row, (label, value) in enumerate(rows):
            self.table.setItem(row, 0, QTableWidgetItem(label))
            value_item = QTableWidgetItem(value)
            value_item.setTextAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
            value_item.setToolTip(value)
            self.table.setItem(row, 1, value_item)

        layout.addWidget(self.table)

    def value_for(self, row: int) -> str:
        item = self.table.item(row, 1)
        return item.text() if item is not None else ""
