"""Bracket screen: rounds, match results and the player's result buttons."""

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

from PyQt6 import QtGui, QtWidgets
from PyQt6.QtCore import Qt, pyqtSignal

from inazumatournament.constants import PLAYER_ID
from inazumatournament.gui.gui_utils import clear_layout, set_label_color
from inazumatournament.models.tournament import Match, Tournament
from inazumatournament.utils import setup_logger

logger = setup_logger(__name__)


class BracketView(QtWidgets.QWidget):
    """
    Widget showing every round of the tournament.
    Player matches get one button per team to report the winner.
    """

    result_submitted = pyqtSignal(int, int, str)  # round index, match index, winner
    simulate_requested = pyqtSignal()
    back_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.tournament: Tournament = Tournament()

        layout = QtWidgets.QVBoxLayout(self)

        header = QtWidgets.QHBoxLayout()
        self.lbl_status = QtWidgets.QLabel()
        font = self.lbl_status.font()
        font.setPointSize(font.pointSize() + 6)
        font.setWeight(QtGui.QFont.Weight.Bold)
        self.lbl_status.setFont(font)
        header.addWidget(self.lbl_status)
        header.addStretch()
        self.btn_back = QtWidgets.QPushButton("Back to Settings")
        self.btn_back.clicked.connect(self.back_requested.emit)
        header.addWidget(self.btn_back)
        layout.addLayout(header)

        scroll = QtWidgets.QScrollArea()
        scroll.setWidgetResizable(True)
        container = QtWidgets.QWidget()
        self.rounds_layout = QtWidgets.QVBoxLayout(container)
        self.rounds_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        scroll.setWidget(container)
        layout.addWidget(scroll, stretch=1)

        footer = QtWidgets.QHBoxLayout()
        self.lbl_bye = QtWidgets.QLabel()
        footer.addWidget(self.lbl_bye)
        footer.addStretch()
        self.btn_simulate = QtWidgets.QPushButton("Simulate Round")
        self.btn_simulate.setToolTip("You have a bye: play out the computer matches")
        self.btn_simulate.clicked.connect(self.simulate_requested.emit)
        footer.addWidget(self.btn_simulate)
        layout.addLayout(footer)

    def team_label(self, team_id: str) -> str:
        if team_id == PLAYER_ID:
            return PLAYER_ID
        opponent = self.tournament.participants.get(team_id)
        if opponent is None:
            return team_id
        return f"{opponent.id} (Lv.{opponent.level}, {opponent.difficulty_name})"

    def display_tournament(self, tournament: Tournament):
        """Rebuild the view from a tournament value."""
        self.tournament = tournament
        self.lbl_status.setText(tournament.status)
        clear_layout(self.rounds_layout)

        if tournament.is_finished:
            self._show_final_message()
            self.lbl_bye.setText("")
            self.btn_simulate.hide()
            return

        for round_index, matches in enumerate(tournament.rounds):
            group = QtWidgets.QGroupBox(f"Round {round_index + 1}")
            group_layout = QtWidgets.QVBoxLayout(group)
            for match_index, match in enumerate(matches):
                group_layout.addWidget(self._create_match_row(round_index, match_index, match))
            self.rounds_layout.addWidget(group)

        if tournament.bye_teams:
            byes = ", ".join(self.team_label(t) for t in tournament.bye_teams)
            self.lbl_bye.setText(f"Bye: {byes}")
        else:
            self.lbl_bye.setText("")

        player_on_bye = (
            tournament.find_player_match(tournament.current_round_index) is None
        )
        self.btn_simulate.setVisible(player_on_bye)

    def _show_final_message(self):
        if self.tournament.champion == PLAYER_ID:
            text, color = "You won the tournament! Congratulations!", "green"
        elif self.tournament.champion:
            text, color = f"{self.team_label(self.tournament.champion)} won the tournament.", "green"
        else:
            text, color = "Game Over!", "red"
        label = QtWidgets.QLabel(text)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        font = label.font()
        font.setPointSize(font.pointSize() + 8)
        label.setFont(font)
        set_label_color(label, color)
        self.rounds_layout.addWidget(label)

    def _create_match_row(
        self, round_index: int, match_index: int, match: Match
    ) -> QtWidgets.QWidget:
        row = QtWidgets.QWidget()
        row_layout = QtWidgets.QHBoxLayout(row)
        row_layout.setContentsMargins(4, 2, 4, 2)
        teams = QtWidgets.QLabel(
            f"{self.team_label(match.team1)}  vs  {self.team_label(match.team2)}"
        )
        row_layout.addWidget(teams, stretch=1)

        if match.winner:
            row_layout.addWidget(QtWidgets.QLabel(f"Winner: {self.team_label(match.winner)}"))
        elif match.involves(PLAYER_ID):
            for team_id in (match.team1, match.team2):
                button = QtWidgets.QPushButton(f"{team_id} wins")
                button.clicked.connect(
                    lambda _checked=False, t=team_id: self.result_submitted.emit(
                        round_index, match_index, t
                    )
                )
                row_layout.addWidget(button)
        else:
            pending = QtWidgets.QLabel("Waiting for result...")
            set_label_color(pending, "gray")
            row_layout.addWidget(pending)
        return row
