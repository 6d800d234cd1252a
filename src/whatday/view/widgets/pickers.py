"""
Scrollable integer pickers for day, month and year.
"""
from PySide6.QtWidgets import QSpinBox
from PySide6.QtCore import Qt

from whatday.model.calendar_utils import format_two_digits, format_year


class TwoDigitPicker(QSpinBox):
    """Spin box showing its value zero-padded ("01" ... "31")."""

    def __init__(self, minimum: int, maximum: int, value: int, parent=None) -> None:
        super().__init__(parent)
        self.setRange(minimum, maximum)
        self.setValue(value)
        self.setWrapping(True)
        self.setAlignment(Qt.AlignCenter)
        self.setFixedWidth(60)

    def textFromValue(self, value: int) -> str:
        return format_two_digits(value)


class YearPicker(QSpinBox):
    """Spin box for years, shown without a thousands separator."""

    def __init__(self, minimum: int, maximum: int, value: int, parent=None) -> None:
        super().__init__(parent)
        self.setGroupSeparatorShown(False)
        self.setRange(minimum, maximum)
        self.setValue(value)
        self.setAlignment(Qt.AlignCenter)
        self.setFixedWidth(80)

    def textFromValue(self, value: int) -> str:
        return format_year(value)
