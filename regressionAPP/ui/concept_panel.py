"""
concept_panel.py

Вкладка "Перевірка розуміння": картки з питаннями, відповідь
ховається/показується кнопкою.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QGroupBox,
    QLabel,
    QPushButton,
    QScrollArea,
)

from regressionAPP.core.concepts import CONCEPT_QUESTIONS, ConceptQuestion
from .styles import MARGIN, SPACING, apply_button_secondary, apply_label_muted

SHOW_TEXT = "Показати відповідь"
HIDE_TEXT = "Сховати відповідь"


class QuestionCard(QGroupBox):
    def __init__(self, index: int, question: ConceptQuestion, parent: Optional[QWidget] = None) -> None:
        super().__init__(f"Питання {index}", parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.setSpacing(SPACING)

        text = QLabel(question.question, self)
        text.setWordWrap(True)

        self.button = QPushButton(SHOW_TEXT, self)
        apply_button_secondary(self.button)

        self.answer = QLabel(f"Відповідь: {question.answer}", self)
        self.answer.setWordWrap(True)
        apply_label_muted(self.answer)
        self.answer.setVisible(False)

        layout.addWidget(text)
        layout.addWidget(self.button)
        layout.addWidget(self.answer)

        self.button.clicked.connect(self.toggle)

    def toggle(self) -> None:
        hidden = self.answer.isHidden()
        self.answer.setVisible(hidden)
        self.button.setText(HIDE_TEXT if hidden else SHOW_TEXT)


class ConceptPanel(QScrollArea):
    def __init__(
        self,
        parent: Optional[QWidget] = None,
        questions: Sequence[ConceptQuestion] = CONCEPT_QUESTIONS,
    ) -> None:
        super().__init__(parent)
        self.setWidgetResizable(True)

        content = QWidget(self)
        layout = QVBoxLayout(content)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.setSpacing(SPACING)

        self.cards: List[QuestionCard] = []
        for idx, q in enumerate(questions, start=1):
            card = QuestionCard(idx, q, content)
            self.cards.append(card)
            layout.addWidget(card)
        layout.addStretch(1)

        self.setWidget(content)
