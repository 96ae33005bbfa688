"""Utilities for managing the GUI."""

from typing import Optional

from PyQt6 import QtWidgets


def update_widget_style(widget: QtWidgets.QWidget) -> None:
    """Change the style on a widget."""
    widget.style().unpolish(widget)
    widget.style().polish(widget)
    widget.update()


def set_label_color(label: QtWidgets.QLabel, color: Optional[str]) -> None:
    """Set the text color of a label; None restores the default."""
    label.setStyleSheet(f"color: {color};" if color else "")
    update_widget_style(label)


def clear_layout(layout: QtWidgets.QLayout) -> None:
    """Remove and delete every widget of a layout."""
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.deleteLater()
        elif item.layout() is not None:
            clear_layout(item.layout())
