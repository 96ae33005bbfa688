"""Settings screen: tournament options and the opponent checklist."""

# Inazuma Tournament
# Copyright (C) 2025  Inazuma Tournament developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import List, Set

from PyQt6 import QtWidgets
from PyQt6.QtCore import Qt, pyqtSignal

from inazumatournament.catalog import filter_catalog, list_series
from inazumatournament.constants import (
    ALL_SERIES,
    DEFAULT_LEVEL_TOLERANCE_LOWER,
    DEFAULT_LEVEL_TOLERANCE_UPPER,
    DEFAULT_PLAYER_LEVEL,
    DEFAULT_SOURCES,
    DEFAULT_TEAM_COUNT,
    DEFAULT_WIN_RATE_MODIFIER,
    MAX_TIER_LEVEL,
    MAX_WIN_RATE_MODIFIER,
    TEAM_COUNT_CHOICES,
)
from inazumatournament.controllers.tournament import playable_opponents_info
from inazumatournament.gui.gui_utils import set_label_color
from inazumatournament.models.opponent import Opponent
from inazumatournament.models.settings import TournamentSettings


class SettingsView(QtWidgets.QWidget):
    """
    Form for tournament settings with a live count of playable opponents.
    """

    generate_requested = pyqtSignal(object)  # TournamentSettings

    def __init__(self, opponents: List[Opponent], parent=None):
        super().__init__(parent)
        self.opponents = list(opponents)
        # Ids ticked by the player; survives re-filtering of the list
        self._checked_ids: Set[str] = {o.id for o in self.opponents}

        layout = QtWidgets.QVBoxLayout(self)

        general_group = QtWidgets.QGroupBox("General")
        form = QtWidgets.QFormLayout(general_group)
        self.spin_player_level = QtWidgets.QSpinBox()
        self.spin_player_level.setRange(0, MAX_TIER_LEVEL)
        self.spin_player_level.setValue(DEFAULT_PLAYER_LEVEL)
        self.spin_player_level.setToolTip("Level of your own team.")
        form.addRow("Your Team Level:", self.spin_player_level)

        self.combo_team_count = QtWidgets.QComboBox()
        for count in TEAM_COUNT_CHOICES:
            self.combo_team_count.addItem(str(count), count)
        self.combo_team_count.setCurrentIndex(
            TEAM_COUNT_CHOICES.index(DEFAULT_TEAM_COUNT)
        )
        form.addRow("Teams:", self.combo_team_count)

        self.spin_tolerance_lower = QtWidgets.QSpinBox()
        self.spin_tolerance_lower.setRange(0, MAX_TIER_LEVEL)
        self.spin_tolerance_lower.setValue(DEFAULT_LEVEL_TOLERANCE_LOWER)
        form.addRow("Level Tolerance (below):", self.spin_tolerance_lower)

        self.spin_tolerance_upper = QtWidgets.QSpinBox()
        self.spin_tolerance_upper.setRange(0, MAX_TIER_LEVEL)
        self.spin_tolerance_upper.setValue(DEFAULT_LEVEL_TOLERANCE_UPPER)
        form.addRow("Level Tolerance (above):", self.spin_tolerance_upper)

        self.spin_modifier = QtWidgets.QSpinBox()
        self.spin_modifier.setRange(0, MAX_WIN_RATE_MODIFIER)
        self.spin_modifier.setValue(DEFAULT_WIN_RATE_MODIFIER)
        self.spin_modifier.setToolTip(
            "Win rate points the stronger computer team gains per level of difference."
        )
        form.addRow("Level Win Rate Modifier:", self.spin_modifier)
        layout.addWidget(general_group)

        modes_group = QtWidgets.QGroupBox("Modes")
        modes_layout = QtWidgets.QHBoxLayout(modes_group)
        self.source_checkboxes: List[QtWidgets.QCheckBox] = []
        for source in DEFAULT_SOURCES:
            checkbox = QtWidgets.QCheckBox(source)
            checkbox.setChecked(True)
            checkbox.toggled.connect(self.populate_opponent_list)
            modes_layout.addWidget(checkbox)
            self.source_checkboxes.append(checkbox)
        layout.addWidget(modes_group)

        opponents_group = QtWidgets.QGroupBox("Unlocked Opponents")
        opponents_layout = QtWidgets.QVBoxLayout(opponents_group)
        series_row = QtWidgets.QHBoxLayout()
        series_row.addWidget(QtWidgets.QLabel("Series:"))
        self.combo_series = QtWidgets.QComboBox()
        self.combo_series.addItem("All", ALL_SERIES)
        for series in list_series(self.opponents):
            self.combo_series.addItem(series, series)
        self.combo_series.currentIndexChanged.connect(self.populate_opponent_list)
        series_row.addWidget(self.combo_series, stretch=1)
        btn_select_all = QtWidgets.QPushButton("Select All")
        btn_select_all.clicked.connect(lambda: self.toggle_all_opponents(True))
        btn_deselect_all = QtWidgets.QPushButton("Deselect All")
        btn_deselect_all.clicked.connect(lambda: self.toggle_all_opponents(False))
        series_row.addWidget(btn_select_all)
        series_row.addWidget(btn_deselect_all)
        opponents_layout.addLayout(series_row)

        self.opponent_list = QtWidgets.QListWidget()
        self.opponent_list.itemChanged.connect(self._on_opponent_toggled)
        opponents_layout.addWidget(self.opponent_list)
        layout.addWidget(opponents_group, stretch=1)

        footer = QtWidgets.QHBoxLayout()
        self.lbl_playable = QtWidgets.QLabel()
        footer.addWidget(self.lbl_playable)
        footer.addStretch()
        self.btn_generate = QtWidgets.QPushButton("Generate Tournament")
        self.btn_generate.clicked.connect(self._on_generate_clicked)
        footer.addWidget(self.btn_generate)
        layout.addLayout(footer)

        for spin in (
            self.spin_player_level,
            self.spin_tolerance_lower,
            self.spin_tolerance_upper,
            self.spin_modifier,
        ):
            spin.valueChanged.connect(self.update_playable_count)
        self.combo_team_count.currentIndexChanged.connect(self.update_playable_count)

        self.populate_opponent_list()

    def allowed_sources(self) -> List[str]:
        return [cb.text() for cb in self.source_checkboxes if cb.isChecked()]

    def populate_opponent_list(self):
        """Rebuild the checklist for the selected modes and series."""
        self.opponent_list.blockSignals(True)
        self.opponent_list.clear()
        visible = filter_catalog(
            self.opponents, self.allowed_sources(), self.combo_series.currentData()
        )
        for opponent in visible:
            item = QtWidgets.QListWidgetItem(opponent.id)
            item.setData(Qt.ItemDataRole.UserRole, opponent.id)
            item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
            item.setCheckState(
                Qt.CheckState.Checked
                if opponent.id in self._checked_ids
                else Qt.CheckState.Unchecked
            )
            self.opponent_list.addItem(item)
        self.opponent_list.blockSignals(False)
        self.update_playable_count()

    def toggle_all_opponents(self, checked: bool):
        state = Qt.CheckState.Checked if checked else Qt.CheckState.Unchecked
        self.opponent_list.blockSignals(True)
        for row in range(self.opponent_list.count()):
            item = self.opponent_list.item(row)
            item.setCheckState(state)
            self._remember_item(item)
        self.opponent_list.blockSignals(False)
        self.update_playable_count()

    def _remember_item(self, item: QtWidgets.QListWidgetItem):
        opponent_id = item.data(Qt.ItemDataRole.UserRole)
        if item.checkState() == Qt.CheckState.Checked:
            self._checked_ids.add(opponent_id)
        else:
            self._checked_ids.discard(opponent_id)

    def _on_opponent_toggled(self, item: QtWidgets.QListWidgetItem):
        self._remember_item(item)
        self.update_playable_count()

    def unlocked_opponents(self) -> List[str]:
        """Ids of the checked opponents currently listed."""
        unlocked = []
        for row in range(self.opponent_list.count()):
            item = self.opponent_list.item(row)
            if item.checkState() == Qt.CheckState.Checked:
                unlocked.append(item.data(Qt.ItemDataRole.UserRole))
        return unlocked

    def current_settings(self) -> TournamentSettings:
        return TournamentSettings(
            player_team_level=self.spin_player_level.value(),
            team_count=self.combo_team_count.currentData(),
            level_tolerance_lower=self.spin_tolerance_lower.value(),
            level_tolerance_upper=self.spin_tolerance_upper.value(),
            level_win_rate_modifier=self.spin_modifier.value(),
            allowed_sources=self.allowed_sources(),
            unlocked_opponents=self.unlocked_opponents(),
        )

    def apply_settings(self, settings: TournamentSettings):
        """Fill the form from a settings object (e.g. one loaded from file)."""
        self.spin_player_level.setValue(settings.player_team_level)
        if settings.team_count in TEAM_COUNT_CHOICES:
            self.combo_team_count.setCurrentIndex(
                TEAM_COUNT_CHOICES.index(settings.team_count)
            )
        self.spin_tolerance_lower.setValue(settings.level_tolerance_lower)
        self.spin_tolerance_upper.setValue(settings.level_tolerance_upper)
        self.spin_modifier.setValue(settings.level_win_rate_modifier)
        for checkbox in self.source_checkboxes:
            checkbox.blockSignals(True)
            checkbox.setChecked(checkbox.text() in settings.allowed_sources)
            checkbox.blockSignals(False)
        if settings.unlocked_opponents:
            self._checked_ids = set(settings.unlocked_opponents)
        self.populate_opponent_list()

    def set_opponents(self, opponents: List[Opponent]):
        """Replace the catalog shown in the checklist."""
        self.opponents = list(opponents)
        self._checked_ids = {o.id for o in self.opponents}
        self.combo_series.blockSignals(True)
        self.combo_series.clear()
        self.combo_series.addItem("All", ALL_SERIES)
        for series in list_series(self.opponents):
            self.combo_series.addItem(series, series)
        self.combo_series.blockSignals(False)
        self.populate_opponent_list()

    def update_playable_count(self):
        """Refresh the playable opponent count; red when too few."""
        settings = self.current_settings()
        info = playable_opponents_info(settings, self.opponents)
        self.lbl_playable.setText(f"Playable Opponents: {info.count}")
        self.lbl_playable.setToolTip("\n".join(info.opponents))
        set_label_color(
            self.lbl_playable,
            None if info.is_sufficient_for(settings.team_count) else "red",
        )

    def _on_generate_clicked(self):
        self.generate_requested.emit(self.current_settings())
