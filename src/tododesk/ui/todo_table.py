"""Table view and model for the todo rows."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt5.QtCore import (
    QAbstractTableModel,
    QEvent,
    QModelIndex,
    QObject,
    Qt,
    pyqtSignal,
)
from PyQt5.QtGui import QColor, QFont, QMouseEvent, QPainter, QPalette
from PyQt5.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QHeaderView,
    QStyle,
    QStyledItemDelegate,
    QStyleOptionButton,
    QStyleOptionViewItem,
    QTableView,
)

from tododesk.core.models import Task
from tododesk.ui.theme import CURRENT_THEME

DEFAULT_QMODEL_INDEX = QModelIndex()

DONE_COLUMN = 0
TASK_COLUMN = 1
DELETE_COLUMN = 2
HEADERS = ("Done", "Task", "")
DELETE_LABEL = "Delete"


class TodoTableModel(QAbstractTableModel):
    """Read-only mirror of the controller's task list.

    Checkbox edits and delete clicks are turned into request signals; the
    rows themselves only change through :meth:`set_tasks`.
    """

    toggle_requested = pyqtSignal(object, bool)  # id, current is_complete
    delete_requested = pyqtSignal(object)  # id

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._tasks: list[Task] = []

    # Qt model API -----------------------------------------------------
    def rowCount(self, parent: QModelIndex = DEFAULT_QMODEL_INDEX) -> int:
        return 0 if parent.isValid() else len(self._tasks)

    def columnCount(self, parent: QModelIndex = DEFAULT_QMODEL_INDEX) -> int:
        return 0 if parent.isValid() else len(HEADERS)

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole and 0 <= section < len(HEADERS):
            return HEADERS[section]
        return super().headerData(section, orientation, role)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self._tasks):
            return None
        task = self._tasks[index.row()]
        col = index.column()

        if col == DONE_COLUMN:
            if role == Qt.CheckStateRole:
                return Qt.Checked if task.is_complete else Qt.Unchecked
            if role == Qt.ToolTipRole:
                return "Mark as not done" if task.is_complete else "Mark as done"
            return None

        if col == TASK_COLUMN:
            if role in (Qt.DisplayRole, Qt.ToolTipRole):
                return task.task
            if role == Qt.FontRole:
                font = QFont()
                font.setStrikeOut(task.is_complete)
                return font
            if role == Qt.TextAlignmentRole:
                return Qt.AlignVCenter | Qt.AlignLeft
            return None

        if col == DELETE_COLUMN and role == Qt.DisplayRole:
            return DELETE_LABEL
        return None

    def flags(self, index: QModelIndex):
        if not index.isValid():
            return Qt.NoItemFlags
        base = Qt.ItemIsEnabled
        if index.column() == DONE_COLUMN:
            base |= Qt.ItemIsUserCheckable
        return base

    def setData(self, index: QModelIndex, value: object, role: int = Qt.EditRole) -> bool:
        if role != Qt.CheckStateRole or not index.isValid():
            return False
        if index.column() != DONE_COLUMN or index.row() >= len(self._tasks):
            return False
        task = self._tasks[index.row()]
        self.toggle_requested.emit(task.id, task.is_complete)
        # The checkbox follows the model once the store confirms the change
        return False

    # Public helpers ---------------------------------------------------
    def set_tasks(self, tasks: Sequence[Task]) -> None:
        self.beginResetModel()
        self._tasks = list(tasks)
        self.endResetModel()

    def task_at(self, row: int) -> Task | None:
        if 0 <= row < len(self._tasks):
            return self._tasks[row]
        return None

    def request_delete(self, row: int) -> None:
        task = self.task_at(row)
        if task is not None:
            self.delete_requested.emit(task.id)


class DeleteButtonDelegate(QStyledItemDelegate):
    """Paint a push button in the cell and report clicks by row."""

    clicked = pyqtSignal(int)

    def paint(self, painter: QPainter, option: QStyleOptionViewItem, index: QModelIndex) -> None:
        button = QStyleOptionButton()
        button.rect = option.rect.adjusted(6, 4, -6, -4)
        button.text = str(index.data(Qt.DisplayRole) or DELETE_LABEL)
        button.state = QStyle.State_Enabled | QStyle.State_Raised
        palette = QPalette(option.palette)
        palette.setColor(QPalette.Button, QColor(CURRENT_THEME["delete_bg"]))
        palette.setColor(QPalette.ButtonText, QColor(CURRENT_THEME["delete_text"]))
        button.palette = palette
        style = option.widget.style() if option.widget is not None else QApplication.style()
        style.drawControl(QStyle.CE_PushButton, button, painter, option.widget)

    def editorEvent(self, event: QEvent, model, option: QStyleOptionViewItem, index: QModelIndex) -> bool:
        if event.type() == QEvent.MouseButtonRelease and isinstance(event, QMouseEvent):
            if event.button() == Qt.LeftButton and option.rect.contains(event.pos()):
                self.clicked.emit(index.row())
                return True
        return super().editorEvent(event, model, option, index)


class TodoTableView(QTableView):
    """Table showing one todo per row: checkbox, text, delete button."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("TodoTable")
        self.setSelectionMode(QAbstractItemView.NoSelection)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setFocusPolicy(Qt.NoFocus)
        self.setAlternatingRowColors(True)
        self.setShowGrid(True)
        self.verticalHeader().setVisible(False)
        self.verticalHeader().setDefaultSectionSize(36)

        self._delete_delegate = DeleteButtonDelegate(self)
        self.setItemDelegateForColumn(DELETE_COLUMN, self._delete_delegate)

    def setModel(self, model) -> None:  # noqa: N802 - Qt override
        super().setModel(model)
        header = self.horizontalHeader()
        header.setSectionResizeMode(DONE_COLUMN, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(TASK_COLUMN, QHeaderView.Stretch)
        header.setSectionResizeMode(DELETE_COLUMN, QHeaderView.Fixed)
        header.resizeSection(DELETE_COLUMN, 96)
        if isinstance(model, TodoTableModel):
            self._delete_delegate.clicked.connect(model.request_delete)

    @property
    def delete_delegate(self) -> DeleteButtonDelegate:
        return self._delete_delegate
