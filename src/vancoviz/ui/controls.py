# src/vancoviz/ui/controls.py
from dataclasses import dataclass
from PySide6.QtCore import Signal
from PySide6.QtWidgets import QVBoxLayout, QPushButton, QDoubleSpinBox, QComboBox, QFrame, QLabel

from vancoengine.types import PatientCovariates
from vancoengine.config import Frequency, DEFAULT_INFUSION_H


@dataclass
class CalculateRequest:
    covariates: PatientCovariates
    frequency: int = Frequency.Q12H


@dataclass
class RegimenRequest:
    covariates: PatientCovariates
    dose_mg: float
    tau_h: float
    infusion_h: float = DEFAULT_INFUSION_H


class ControlsPanel(QFrame):
    calculateRequested = Signal(CalculateRequest)
    regimenRequested = Signal(RegimenRequest)
    noteRequested = Signal(RegimenRequest)
    clearRequested = Signal()

    def __init__(self):
        super().__init__()
        self.setFrameShape(QFrame.StyledPanel)
        layout = QVBoxLayout(self)

        # --- Patient ---
        layout.addWidget(QLabel("Patient"))
        self.sex = QComboBox(); self.sex.addItems(["male", "female"])
        layout.addWidget(QLabel("Sex"))
        layout.addWidget(self.sex)

        self.age = QDoubleSpinBox(); self.age.setDecimals(0); self.age.setRange(0, 150); self.age.setValue(65)
        self.age.setSuffix(" yrs")
        layout.addWidget(QLabel("Age"))
        layout.addWidget(self.age)

        self.height_in = QDoubleSpinBox(); self.height_in.setDecimals(1); self.height_in.setRange(0, 120)
        self.height_in.setValue(70); self.height_in.setSuffix(" in")
        layout.addWidget(QLabel("Height (in)"))
        layout.addWidget(self.height_in)

        self.weight = QDoubleSpinBox(); self.weight.setDecimals(1); self.weight.setRange(0, 500)
        self.weight.setValue(80); self.weight.setSuffix(" kg")
        layout.addWidget(QLabel("Weight (kg)"))
        layout.addWidget(self.weight)

        self.creatinine = QDoubleSpinBox(); self.creatinine.setDecimals(2); self.creatinine.setRange(0, 30)
        self.creatinine.setValue(1.0); self.creatinine.setSuffix(" mg/dL")
        layout.addWidget(QLabel("Serum creatinine (mg/dL)"))
        layout.addWidget(self.creatinine)

        self.frequency = QComboBox()
        for f in Frequency:
            self.frequency.addItem(f"q{int(f)}h", int(f))
        layout.addWidget(QLabel("Frequency"))
        layout.addWidget(self.frequency)

        calc = QPushButton("Calculate"); layout.addWidget(calc)
        calc.clicked.connect(self._emit_calculate)
        # Switching frequency re-runs the menu
        self.frequency.currentIndexChanged.connect(self._emit_calculate)

        # --- Regimen ---
        layout.addWidget(QLabel("Regimen"))
        self.dose = QDoubleSpinBox(); self.dose.setRange(0, 10000); self.dose.setSingleStep(100)
        self.dose.setSuffix(" mg")
        layout.addWidget(QLabel("Dose (mg)"))
        layout.addWidget(self.dose)

        self.tau = QDoubleSpinBox(); self.tau.setDecimals(0); self.tau.setRange(1, 96); self.tau.setValue(12)
        self.tau.setSuffix(" h")
        layout.addWidget(QLabel("Interval (h)"))
        layout.addWidget(self.tau)

        self.infusion = QDoubleSpinBox(); self.infusion.setDecimals(1); self.infusion.setRange(0.5, 24)
        self.infusion.setValue(DEFAULT_INFUSION_H); self.infusion.setSuffix(" h")
        layout.addWidget(QLabel("Infusion (h)"))
        layout.addWidget(self.infusion)

        recalc = QPushButton("Recalculate"); layout.addWidget(recalc)
        recalc.clicked.connect(self.emit_regimen)

        note = QPushButton("Progress note"); layout.addWidget(note)
        note.clicked.connect(lambda: self.noteRequested.emit(self._regimen_request()))

        clear = QPushButton("Clear"); layout.addWidget(clear)
        clear.clicked.connect(lambda: self.clearRequested.emit())
        layout.addStretch(1)

    def covariates(self) -> PatientCovariates:
        return PatientCovariates(
            sex=self.sex.currentText(),
            age=float(self.age.value()),
            height_in=float(self.height_in.value()),
            weight_kg=float(self.weight.value()),
            creatinine=float(self.creatinine.value()),
        )

    def set_regimen(self, dose_mg: float, tau_h: float, infusion_h: float = DEFAULT_INFUSION_H):
        self.dose.setValue(dose_mg)
        self.tau.setValue(tau_h)
        self.infusion.setValue(infusion_h)

    def _regimen_request(self) -> RegimenRequest:
        return RegimenRequest(covariates=self.covariates(), dose_mg=float(self.dose.value()),
                              tau_h=float(self.tau.value()), infusion_h=float(self.infusion.value()))

    def _emit_calculate(self):
        req = CalculateRequest(covariates=self.covariates(), frequency=int(self.frequency.currentData()))
        self.calculateRequested.emit(req)

    def emit_regimen(self):
        self.regimenRequested.emit(self._regimen_request())
