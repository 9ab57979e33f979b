# src/vancoviz/ui/plots.py
from PySide6.QtWidgets import QWidget, QVBoxLayout
import pyqtgraph as pg

from vancoengine.config import TROUGH_TARGET


class PlotWidget(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        # Main plot area
        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setLabel("left", "Concentration", units="mcg/mL")
        self.plot_widget.setLabel("bottom", "Time", units="h")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setYRange(0, 30)
        self.plot_widget.addLegend()
        layout.addWidget(self.plot_widget)

        self.curve = None

    def plot_curve(self, t, C, label: str = "Concentration"):
        # Rebuilt on every render
        self.plot_widget.clear()
        lo, hi = TROUGH_TARGET
        band = pg.LinearRegionItem(values=(lo, hi), orientation="horizontal",
                                   brush=pg.mkBrush(0, 255, 0, 25), movable=False)
        self.plot_widget.addItem(band)
        self.curve = self.plot_widget.plot(
            t, C,
            pen=pg.mkPen("#7C9082", width=2),
            name=label
        )

    def clear(self):
        self.plot_widget.clear()
        self.curve = None
