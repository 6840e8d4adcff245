"""
Window for compressing and decompressing a single file
"""
import os
import sys

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from huffproc.cli import default_output
from huffproc.huff_exceptions import HuffException
from huffproc.huff_processor import HuffProcessor

BUTTON_STYLE = """
    font-size: 15px;
    color: white;
    font-weight: 500;
    background-color: {color};
    border-radius: 10px;
    """

LABEL_STYLE = """
    font-size: 15px;
    color: black;
    font-weight: 500;
    """


class MainWindow(QMainWindow):
    """
    class controls main window
    """

    def __init__(self):
        super().__init__()
        self.setFixedSize(QSize(800, 450))
        self.setWindowTitle("Huffman Compressor")

        self.central_widget = QWidget()
        self.layout = QVBoxLayout()
        self.layout.setContentsMargins(40, 30, 40, 30)
        self.central_widget.setStyleSheet("background-color: #E8EEF2;")

        self.name = QLabel("Huffman compressor")
        self.name.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.name.setStyleSheet(
            """
            font-size: 35px;
            color: #0E103D;
            font-weight: 700;
        """
        )
        self.layout.addWidget(self.name)

        self.pick_button = self._add_button("Pick a file", "#0E103D", QSize(400, 60), self.pick_file)

        self.selected_file = None
        self.file_label = QLabel("No file selected")
        self.file_label.setStyleSheet(LABEL_STYLE)
        self.file_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.file_label)

        self.result_label = QLabel("")
        self.result_label.setStyleSheet(LABEL_STYLE)
        self.result_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.result_label)

        self.compress_button = self._add_button(
            "Compress", "#0E103D", QSize(200, 60), self.compress_file
        )
        self.decompress_button = self._add_button(
            "Decompress", "#3590F3", QSize(200, 60), self.decompress_file
        )

        self.central_widget.setLayout(self.layout)
        self.setCentralWidget(self.central_widget)

    def _add_button(self, text, color, size, handler):
        button = QPushButton(text)
        button.setStyleSheet(BUTTON_STYLE.format(color=color))
        button.setFixedSize(size)
        button.clicked.connect(handler)

        button_layout = QHBoxLayout()
        button_layout.addStretch()
        button_layout.addWidget(button)
        button_layout.addStretch()
        self.layout.addLayout(button_layout)
        return button

    def pick_file(self):
        """
        function handles picking files
        """
        dialog = QFileDialog()
        dialog.setFileMode(QFileDialog.FileMode.ExistingFile)
        if dialog.exec():
            self.selected_file = dialog.selectedFiles()[0]
            self.file_label.setText(f"Selected: {os.path.basename(self.selected_file)}")
            self.result_label.setText("")

    def compress_file(self):
        """
        function handles file compression
        """
        self._run(decompress=False)

    def decompress_file(self):
        """
        function handles file decompression
        """
        self._run(decompress=True)

    def _run(self, decompress: bool):
        if not self.selected_file:
            QMessageBox.warning(self, "Error", "No file selected, select it first")
            return

        output = default_output(self.selected_file, decompress)
        try:
            if decompress:
                HuffProcessor.decompress_file(self.selected_file, output)
            else:
                HuffProcessor.compress_file(self.selected_file, output)
        except (HuffException, OSError) as e:
            QMessageBox.critical(self, "Error", str(e))
            return

        before = os.stat(self.selected_file).st_size
        after = os.stat(output).st_size
        self.result_label.setText(
            f"{os.path.basename(output)}: {round(before / 1024, 2)} KB -> {round(after / 1024, 2)} KB"
        )
        action = "decompressed" if decompress else "compressed"
        QMessageBox.information(self, "Success", f"File was {action}!")


def run():
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(run())
