# -*- coding: utf-8 -*-

import html

from PyQt5 import QtCore, QtGui, QtWidgets

from Orbit.features.app_tiles import app_tiles


class Ui_MainWindow(object):
    def setupUi(self, MainWindow):
        MainWindow.setObjectName("Orbit")
        MainWindow.setStyleSheet("QMainWindow{background-color: rgb(18, 18, 18);}")

        self.centralwidget = QtWidgets.QWidget(MainWindow)
        self.centralwidget.setObjectName("centralwidget")

        primary_font = "Inter"
        if not QtGui.QFont(primary_font).exactMatch():
            primary_font = "Segoe UI"

        scrollbars_qss = (
            "QScrollBar:vertical{background:transparent;width:10px;margin:6px 3px 6px 0px;}"
            "QScrollBar::handle:vertical{background:rgba(255,255,255,40);border-radius:5px;min-height:28px;}"
            "QScrollBar::handle:vertical:hover{background:rgba(255,255,255,70);}"
            "QScrollBar::add-line:vertical,QScrollBar::sub-line:vertical{height:0px;}"
            "QScrollBar::add-page:vertical,QScrollBar::sub-page:vertical{background:transparent;}"
        )

        root = QtWidgets.QHBoxLayout(self.centralwidget)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        # Sidebar: window controls, title, app tiles.
        self.sidebar = QtWidgets.QFrame(self.centralwidget)
        self.sidebar.setObjectName("sidebar")
        self.sidebar.setFixedWidth(240)
        self.sidebar.setStyleSheet(
            "QFrame#sidebar{"
            "background-color: rgba(30, 30, 30, 220);"
            "border-right: 1px solid rgba(255, 255, 255, 26);"
            "}"
        )
        side_layout = QtWidgets.QVBoxLayout(self.sidebar)
        side_layout.setContentsMargins(12, 8, 12, 12)
        side_layout.setSpacing(10)

        controls = QtWidgets.QHBoxLayout()
        controls.setSpacing(8)
        self.closeDot = self._window_dot(self.sidebar, "closeDot", "#FF5F57")
        self.minimizeDot = self._window_dot(self.sidebar, "minimizeDot", "#FEBC2E")
        self.maximizeDot = self._window_dot(self.sidebar, "maximizeDot", "#28C840")
        controls.addWidget(self.closeDot)
        controls.addWidget(self.minimizeDot)
        controls.addWidget(self.maximizeDot)
        controls.addStretch(1)

        self.titleLabel = QtWidgets.QLabel(self.sidebar)
        self.titleLabel.setStyleSheet(
            "color: rgb(255, 255, 255);"
            f"font: 600 15pt \"{primary_font}\";"
            "letter-spacing: 1px;"
            "padding: 8px 0px 0px 32px;"
        )
        self.titleLabel.setObjectName("titleLabel")

        self.appList = QtWidgets.QListWidget(self.sidebar)
        self.appList.setObjectName("appList")
        self.appList.setIconSize(QtCore.QSize(32, 32))
        self.appList.setCursor(QtGui.QCursor(QtCore.Qt.PointingHandCursor))
        self.appList.setStyleSheet(
            "QListWidget{"
            "background: transparent;"
            "border: none;"
            "color: rgba(240, 240, 240, 230);"
            f"font: 11pt \"{primary_font}\";"
            "}"
            "QListWidget::item{padding: 6px; border-radius: 8px;}"
            "QListWidget::item:hover{background-color: rgb(45, 45, 45);}"
            "QListWidget::item:selected{background-color: rgb(45, 45, 45); color: white;}"
            + scrollbars_qss
        )

        side_layout.addLayout(controls)
        side_layout.addWidget(self.titleLabel)
        side_layout.addWidget(self.appList, 1)

        # Main panel: status, chat log, input row.
        self.mainPanel = QtWidgets.QFrame(self.centralwidget)
        self.mainPanel.setObjectName("mainPanel")
        main_layout = QtWidgets.QVBoxLayout(self.mainPanel)
        main_layout.setContentsMargins(28, 20, 28, 20)
        main_layout.setSpacing(14)

        self.statusChip = QtWidgets.QLabel(self.mainPanel)
        self.statusChip.setStyleSheet(
            "color: rgb(230, 230, 230);"
            "background-color: rgba(255, 255, 255, 14);"
            "border: 1px solid rgba(255, 255, 255, 40);"
            "border-radius: 10px;"
            "padding: 6px 10px;"
            f"font: 600 9pt \"{primary_font}\";"
        )
        self.statusChip.setObjectName("statusChip")
        self.statusChip.setSizePolicy(QtWidgets.QSizePolicy.Maximum, QtWidgets.QSizePolicy.Fixed)

        self.chatLog = QtWidgets.QTextBrowser(self.mainPanel)
        self.chatLog.setObjectName("chatLog")
        self.chatLog.setStyleSheet(
            "QTextBrowser{"
            "background-color: rgb(30, 30, 30);"
            "border: 1px solid rgba(255, 255, 255, 20);"
            "border-radius: 14px;"
            "padding: 14px;"
            "color: rgba(235, 235, 235, 235);"
            f"font: 11pt \"{primary_font}\";"
            "}"
            + scrollbars_qss
        )

        input_row = QtWidgets.QHBoxLayout()
        input_row.setSpacing(10)

        self.inputLine = QtWidgets.QLineEdit(self.mainPanel)
        self.inputLine.setObjectName("inputLine")
        self.inputLine.setMinimumHeight(44)
        self.inputLine.setStyleSheet(
            "QLineEdit{"
            "background-color: rgb(30, 30, 30);"
            "border: 1px solid rgba(255, 255, 255, 30);"
            "border-radius: 12px;"
            "padding: 6px 14px;"
            "color: white;"
            f"font: 11pt \"{primary_font}\";"
            "}"
        )

        button_qss = (
            "QPushButton{"
            "background-color: rgb(45, 45, 45);"
            "color: white;"
            f"font: 600 11pt \"{primary_font}\";"
            "border-radius: 12px;"
            "border: 1px solid rgba(255, 255, 255, 40);"
            "padding: 6px 16px;"
            "}"
            "QPushButton:hover{background-color: rgb(60, 60, 60);}"
            "QPushButton:disabled{color: rgba(255,255,255,90);}"
        )

        self.micButton = QtWidgets.QPushButton(self.mainPanel)
        self.micButton.setObjectName("micButton")
        self.micButton.setMinimumSize(QtCore.QSize(96, 44))
        self.micButton.setCursor(QtGui.QCursor(QtCore.Qt.PointingHandCursor))
        self.micButton.setStyleSheet(button_qss)

        self.sendButton = QtWidgets.QPushButton(self.mainPanel)
        self.sendButton.setObjectName("sendButton")
        self.sendButton.setMinimumSize(QtCore.QSize(96, 44))
        self.sendButton.setCursor(QtGui.QCursor(QtCore.Qt.PointingHandCursor))
        self.sendButton.setStyleSheet(button_qss)

        input_row.addWidget(self.inputLine, 1)
        input_row.addWidget(self.micButton)
        input_row.addWidget(self.sendButton)

        main_layout.addWidget(self.statusChip)
        main_layout.addWidget(self.chatLog, 1)
        main_layout.addLayout(input_row)

        root.addWidget(self.sidebar)
        root.addWidget(self.mainPanel, 1)

        MainWindow.setCentralWidget(self.centralwidget)

        self.retranslateUi(MainWindow)
        QtCore.QMetaObject.connectSlotsByName(MainWindow)

    def _window_dot(self, parent, name, color):
        dot = QtWidgets.QPushButton(parent)
        dot.setObjectName(name)
        dot.setFixedSize(QtCore.QSize(12, 12))
        dot.setCursor(QtGui.QCursor(QtCore.Qt.PointingHandCursor))
        dot.setStyleSheet(
            "QPushButton{"
            f"background-color: {color};"
            "border: none;"
            "border-radius: 6px;"
            "}"
            "QPushButton:hover{background-color: rgba(255, 255, 255, 150);}"
        )
        return dot

    def setApps(self, app_names):
        self.appList.clear()
        for tile in app_tiles(app_names):
            item = QtWidgets.QListWidgetItem(tile["label"])
            item.setIcon(self._initial_icon(tile["initial"]))
            item.setData(QtCore.Qt.UserRole, tile["name"])
            self.appList.addItem(item)

    def _initial_icon(self, initial):
        pix = QtGui.QPixmap(32, 32)
        pix.fill(QtCore.Qt.transparent)
        painter = QtGui.QPainter(pix)
        painter.setRenderHint(QtGui.QPainter.Antialiasing)
        painter.setBrush(QtGui.QColor(45, 45, 45))
        painter.setPen(QtCore.Qt.NoPen)
        painter.drawRoundedRect(0, 0, 32, 32, 8, 8)
        painter.setPen(QtGui.QColor(255, 255, 255))
        painter.drawText(pix.rect(), QtCore.Qt.AlignCenter, initial)
        painter.end()
        return QtGui.QIcon(pix)

    def appendMessage(self, message):
        stamp = message.timestamp.strftime("%H:%M")
        content = html.escape(message.content)
        if message.kind == "user":
            color, who = "#FFFFFF", "You"
        else:
            color, who = "#9E9E9E", "Orbit"
        self.chatLog.append(
            f"<div style='margin:4px 0'><span style='color:{color}'><b>{who}</b></span>"
            f" <span style='color:#616161'>{stamp}</span><br/>{content}</div>"
        )

    def setListening(self, listening):
        _translate = QtCore.QCoreApplication.translate
        self.micButton.setEnabled(not listening)
        self.micButton.setText(_translate("MainWindow", "Listening" if listening else "Mic"))

    def retranslateUi(self, MainWindow):
        _translate = QtCore.QCoreApplication.translate
        MainWindow.setWindowTitle(_translate("MainWindow", "Orbit"))
        self.titleLabel.setText(_translate("MainWindow", "Orbit"))
        self.statusChip.setText(_translate("MainWindow", "LOADING APPS"))
        self.inputLine.setPlaceholderText(_translate("MainWindow", "Type a command, e.g. open safari"))
        self.micButton.setText(_translate("MainWindow", "Mic"))
        self.sendButton.setText(_translate("MainWindow", "Send"))
