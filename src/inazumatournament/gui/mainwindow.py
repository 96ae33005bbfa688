"""Main GUI window for Inazuma Tournament."""

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

import asyncio
import sys
from typing import List, Optional

from PyQt6 import QtWidgets
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMessageBox

from inazumatournament import APP_NAME, APP_VERSION
from inazumatournament.catalog import (
    CsvOpponentCatalog,
    OpponentCatalog,
    StaticOpponentCatalog,
)
from inazumatournament.constants import CSV_FILTER, SETTINGS_FILE_EXTENSION
from inazumatournament.exceptions import InazumaTournamentException
from inazumatournament.gui.views.bracket_view import BracketView
from inazumatournament.gui.views.settings_view import SettingsView
from inazumatournament.models.opponent import Opponent
from inazumatournament.models.settings import TournamentSettings, load_settings
from inazumatournament.models.tournament import Tournament
from inazumatournament.tournament import (
    generate_tournament,
    simulate_round,
    update_match_result,
)
from inazumatournament.utils import setup_logger

logger = setup_logger(__name__)


# --- Main Application Window ---
class InazumaTournamentMainWindow(QtWidgets.QMainWindow):
    """Main application window for Inazuma Tournament.

    The window only keeps the tournament value returned by the last engine
    call and hands it back on the next one.
    """

    def __init__(self, opponents: List[Opponent]) -> None:
        super().__init__()
        self.opponents = opponents
        self.tournament: Optional[Tournament] = None
        self._setup_ui()

    def _setup_ui(self):
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setGeometry(100, 100, 900, 760)
        self.stacked_widget = QtWidgets.QStackedWidget()
        self.setCentralWidget(self.stacked_widget)

        self.settings_view = SettingsView(self.opponents, self)
        self.settings_view.generate_requested.connect(self.handle_generate_tournament)
        self.stacked_widget.addWidget(self.settings_view)

        self.bracket_view = BracketView(self)
        self.bracket_view.result_submitted.connect(self.handle_match_result)
        self.bracket_view.simulate_requested.connect(self.handle_simulate_round)
        self.bracket_view.back_requested.connect(self.show_settings_screen)
        self.stacked_widget.addWidget(self.bracket_view)

        self._setup_menu()
        self.statusBar().showMessage(f"{len(self.opponents)} opponents loaded.")
        logger.info(f"{APP_NAME} v{APP_VERSION} started.")

    def _setup_menu(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("&File")
        self.open_catalog_action = self._create_action(
            "&Open Opponent Catalog...", self.open_catalog, "Ctrl+O"
        )
        self.load_settings_action = self._create_action(
            "&Load Settings...", self.open_settings_file, "Ctrl+L"
        )
        self.exit_action = self._create_action("E&xit", self.close, "Ctrl+Q")
        file_menu.addActions([self.open_catalog_action, self.load_settings_action])
        file_menu.addSeparator()
        file_menu.addAction(self.exit_action)

        help_menu = menu_bar.addMenu("&Help")
        help_menu.addAction("About...", self.show_about_dialog)

    def _create_action(self, text: str, slot: callable, shortcut: str = "") -> QAction:
        action = QAction(text, self)
        action.triggered.connect(slot)
        if shortcut:
            action.setShortcut(shortcut)
        return action

    def open_catalog(self):
        filename, _ = QtWidgets.QFileDialog.getOpenFileName(
            self, "Open Opponent Catalog", "", CSV_FILTER
        )
        if not filename:
            return
        try:
            opponents = asyncio.run(CsvOpponentCatalog(filename).fetch_opponents())
        except InazumaTournamentException as e:
            self._show_error("Cannot Load Catalog", e)
            return
        self.opponents = opponents
        self.tournament = None
        self.settings_view.set_opponents(opponents)
        self.show_settings_screen()
        self.statusBar().showMessage(f"{len(opponents)} opponents loaded from {filename}")

    def open_settings_file(self):
        filename, _ = QtWidgets.QFileDialog.getOpenFileName(
            self, "Load Settings", "", f"Settings (*{SETTINGS_FILE_EXTENSION})"
        )
        if not filename:
            return
        try:
            settings = load_settings(filename)
        except InazumaTournamentException as e:
            self._show_error("Cannot Load Settings", e)
            return
        self.settings_view.apply_settings(settings)
        self.show_settings_screen()
        self.statusBar().showMessage(f"Settings loaded from {filename}")

    def show_about_dialog(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"{APP_NAME} v{APP_VERSION}\n\n"
            "Single-elimination tournaments against Inazuma Eleven teams.",
        )

    def show_settings_screen(self):
        self.stacked_widget.setCurrentWidget(self.settings_view)

    def show_tournament_screen(self):
        self.stacked_widget.setCurrentWidget(self.bracket_view)

    def _show_error(self, title: str, error: Exception):
        logger.error("%s: %s", title, error)
        QMessageBox.warning(self, title, str(error))

    def handle_generate_tournament(self, settings: TournamentSettings):
        catalog = StaticOpponentCatalog(self.opponents)
        try:
            self.tournament = asyncio.run(generate_tournament(settings, catalog))
        except InazumaTournamentException as e:
            self._show_error("Cannot Generate Tournament", e)
            return
        self.bracket_view.display_tournament(self.tournament)
        self.show_tournament_screen()

    def handle_match_result(self, round_index: int, match_index: int, winner: str):
        if self.tournament is None:
            return
        try:
            self.tournament = update_match_result(
                self.tournament, round_index, match_index, winner
            )
        except InazumaTournamentException as e:
            self._show_error("Cannot Record Result", e)
            return
        self.bracket_view.display_tournament(self.tournament)
        self.statusBar().showMessage(self.tournament.status)

    def handle_simulate_round(self):
        if self.tournament is None:
            return
        self.tournament = simulate_round(self.tournament)
        self.bracket_view.display_tournament(self.tournament)
        self.statusBar().showMessage(self.tournament.status)


def run_app(catalog: OpponentCatalog) -> int:
    """Load the catalog and run the Qt event loop.

    Raises:
        DataUnavailableException: If the catalog cannot be loaded
    """
    opponents = asyncio.run(catalog.fetch_opponents())
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    window = InazumaTournamentMainWindow(opponents)
    window.show()
    return app.exec()
