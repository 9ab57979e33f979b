# src/vancoviz/ui/main_window.py
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QStatusBar, QTableWidget,
    QTableWidgetItem, QPushButton, QLabel, QDialog, QPlainTextEdit,
)
from .controls import ControlsPanel, CalculateRequest, RegimenRequest
from .plots import PlotWidget
from vancoengine.errors import VancomycinError
from vancoengine.safety import validate_covariates
from vancoengine.simulate import run_recommendation, run_regimen
from vancoengine.dosing import in_band
from vancoengine.config import AUC_ACCEPTABLE, AUC_SUGGESTED
from ..note import progress_note


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Vancomycin AUC Dosing")
        self.resize(1100, 680)

        central = QWidget(self); self.setCentralWidget(central)
        root = QHBoxLayout(central)

        self.controls = ControlsPanel()
        right = QVBoxLayout()
        self.summary = QLabel("-- mg q--h (over -- hr)")
        self.table = QTableWidget(0, 5)
        self.table.setHorizontalHeaderLabels(
            ["Dose", "AUC24/MIC (mcg*hr/mL)", "Peak (mcg/mL)", "Trough (mcg/mL)", ""])
        self.plot = PlotWidget()
        right.addWidget(self.summary)
        right.addWidget(self.table)
        right.addWidget(self.plot, 1)
        root.addWidget(self.controls, 0)
        root.addLayout(right, 1)

        self.status = QStatusBar(); self.setStatusBar(self.status)

        # wire events
        self.controls.calculateRequested.connect(self.on_calculate)
        self.controls.regimenRequested.connect(self.on_regimen)
        self.controls.noteRequested.connect(self.on_note)
        self.controls.clearRequested.connect(self.on_clear)

    def on_calculate(self, req: CalculateRequest):
        try:
            validate_covariates(req.covariates)
            result = run_recommendation(req.covariates, req.frequency)
        except VancomycinError as e:
            self.status.showMessage(f"Error: {e}", 8000)
            return

        self._fill_table(result.recommendation.candidates, req.frequency)
        if result.warnings:
            self.status.showMessage("WARNING: " + " ".join(result.warnings), 8000)

        if result.selected is not None:
            self.controls.set_regimen(result.selected.dose_mg, req.frequency)
            self._show_regimen(result.selected, result.t, result.C)

    def on_regimen(self, req: RegimenRequest):
        try:
            validate_covariates(req.covariates)
            result = run_regimen(req.covariates, req.dose_mg, req.tau_h, req.infusion_h)
        except ValueError as e:
            self.status.showMessage(f"Error: {e}", 8000)
            return

        self._show_regimen(result.candidate, result.t, result.C)
        if result.warnings:
            self.status.showMessage("WARNING: " + " ".join(result.warnings), 8000)

    def _show_regimen(self, c, t, C):
        self.summary.setText(
            f"{c.dose_mg:g} mg q{c.tau_h:g}h (over {c.infusion_h:g} hr) | "
            f"AUC {c.auc24:.1f} mcg*hr/mL | Peak {c.peak:.1f} mcg/mL | Trough {c.trough:.1f} mcg/mL")
        self.plot.plot_curve(t, C)

    def on_note(self, req: RegimenRequest):
        try:
            result = run_regimen(req.covariates, req.dose_mg, req.tau_h, req.infusion_h)
        except ValueError as e:
            self.status.showMessage(f"Error: {e}", 8000)
            return
        dlg = QDialog(self); dlg.setWindowTitle("Progress note")
        layout = QVBoxLayout(dlg)
        text = QPlainTextEdit(progress_note(req.covariates, result.body, result.candidate))
        text.setReadOnly(True)
        layout.addWidget(text)
        dlg.resize(640, 560)
        dlg.exec()

    def on_clear(self):
        self.table.setRowCount(0)
        self.summary.setText("-- mg q--h (over -- hr)")
        self.plot.clear()
        self.status.clearMessage()

    def _fill_table(self, candidates, frequency: int):
        self.table.setRowCount(len(candidates))
        for row, c in enumerate(candidates):
            auc_item = QTableWidgetItem(f"{c.auc24:.0f}")
            if in_band(c, AUC_ACCEPTABLE):
                auc_item.setBackground(self.palette().highlight())
            self.table.setItem(row, 0, QTableWidgetItem(f"{c.dose_mg:g} mg ({c.mg_per_kg:g} mg/kg)"))
            self.table.setItem(row, 1, auc_item)
            self.table.setItem(row, 2, QTableWidgetItem(f"{c.peak:.1f}"))
            self.table.setItem(row, 3, QTableWidgetItem(f"{c.trough:.1f}"))

            button = QPushButton("Suggested" if in_band(c, AUC_SUGGESTED) else "Select")
            button.clicked.connect(lambda _=False, dose=c.dose_mg: self._select(dose, frequency))
            self.table.setCellWidget(row, 4, button)

    def _select(self, dose_mg: float, frequency: int):
        self.controls.set_regimen(dose_mg, frequency)
        self.controls.emit_regimen()
